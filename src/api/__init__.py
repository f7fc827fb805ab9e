"""API — camada de borda.

Responsabilidades:
- Receber webhooks da Chec e validar assinatura/frescor
- Falar com o provedor de SMS (Twilio)
- Expor as rotas HTTP

Subpastas:
- connectors/: adapters por sistema externo
- routes/: endpoints HTTP

NÃO PODE conter: formatação de notificação nem orquestração de use cases.
"""
