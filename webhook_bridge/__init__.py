"""Bridge de webhooks Graylog -> Slack/Mattermost.

Este pacote contém:
- constants: variáveis de ambiente, tabela de severidade e paleta de cores
- config: carregamento da configuração (YAML + ambiente)
- alert: decodificação do payload do Graylog e valores derivados
- detection: nome e cor por severidade
- formatters: renderização do Alert em ChatMessage
- platforms: serialização do ChatMessage por plataforma
- services: envio para o webhook de destino
- controller: criação do Flask app e endpoints
"""
