import os

# Configurações globais de ambiente
# TELEGRAM_BOT_TOKEN, TELEGRAM_CHAT_ID e ALLOWED_CORS_ORIGIN são lidos por config.Settings.from_env
DEFAULT_TELEGRAM_API_BASE_URL = "https://api.telegram.org"
DEFAULT_TELEGRAM_TIMEOUT_SECONDS = "10"
APP_PORT = int(os.getenv("APP_PORT", "80"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

TELEGRAM_PARSE_MODE = "Markdown"

# Divisor padrão aplicado a todo timestamp bruto antes da subtração (resultado em ms).
# 1.0 = entrada já em milissegundos (window.performance.timing); 1e6 = nanossegundos.
# Sobrescrito por TIMING_UNIT_DIVISOR via config.Settings.from_env
DEFAULT_TIMING_UNIT_DIVISOR = "1.0"

MESSAGE_HEADER = "*Received message:*"
TIMING_HEADER = "*Timing:*"
RESOURCES_HEADER = "*Resources:*"

CORS_HEADERS = {
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept, Authorization",
    "Access-Control-Allow-Credentials": "true",
}

# Intervalos de navegação: (rótulo, campo final, campo inicial)
TIMING_INTERVALS = (
    ("Redirect", "redirectEnd", "redirectStart"),
    ("DNS Lookup", "domainLookupEnd", "domainLookupStart"),
    ("TCP Connect", "connectEnd", "connectStart"),
    ("TLS Handshake", "connectEnd", "secureConnectionStart"),
    ("Request (TTFB)", "responseStart", "requestStart"),
    ("Response", "responseEnd", "responseStart"),
    ("DOM Processing", "domComplete", "domLoading"),
    ("DOM Content Loaded", "domContentLoadedEventEnd", "navigationStart"),
    ("Load Event", "loadEventEnd", "loadEventStart"),
    ("Total Page Load", "loadEventEnd", "navigationStart"),
)

# Intervalos por recurso (PerformanceResourceTiming). "duration" já vem pronto
# no recurso; quando ausente usa responseEnd - startTime.
RESOURCE_INTERVALS = (
    ("Redirect", "redirectEnd", "redirectStart"),
    ("DNS Lookup", "domainLookupEnd", "domainLookupStart"),
    ("TCP Connect", "connectEnd", "connectStart"),
    ("TLS Handshake", "connectEnd", "secureConnectionStart"),
    ("Request (TTFB)", "responseStart", "requestStart"),
    ("Response", "responseEnd", "responseStart"),
)

# Campos de timestamp consumidos pelos intervalos de recurso (não são impressos crus)
RESOURCE_TIMESTAMP_FIELDS = frozenset(
    [field for _, end, start in RESOURCE_INTERVALS for field in (end, start)]
    + ["startTime", "fetchStart", "workerStart", "duration"]
)

# Eventos opcionais: o navegador reporta 0 quando não ocorreram (sem redirect, sem TLS)
OPTIONAL_ZERO_FIELDS = frozenset(["redirectStart", "redirectEnd", "secureConnectionStart"])
