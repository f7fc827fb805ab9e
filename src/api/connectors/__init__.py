"""Connectors — adapters de borda para sistemas externos.

Estrutura:
- chec/: webhooks da plataforma Chec (Commerce.js)
- twilio/: envio de SMS via Twilio REST API
"""

__all__: list[str] = []
