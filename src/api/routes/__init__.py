"""Rotas HTTP da API.

Responsabilidades:
- Endpoints HTTP (webhook Chec, health)
- Tradução de erros de parsing/verificação em status HTTP
- Delegação para connectors e use cases

Estrutura:
- routes/chec/: webhook de pedidos
- routes/health/: liveness
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
