"""Proxy de webhook -> Telegram.

Este pacote contém:
- constants: variáveis de ambiente e tabelas de intervalos
- config: configuração imutável (Settings)
- values: classificação e coerção dos valores do payload
- utils: helpers de Markdown e formatação
- formatters: montagem da mensagem (timing, recursos, campos genéricos)
- services: integração com a Bot API do Telegram
- controller: criação do Flask app e endpoints
"""
