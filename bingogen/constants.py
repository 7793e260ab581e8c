"""All magic values live here — no inline literals anywhere else."""

# Providers and models
PROVIDER_GEMINI = "gemini"
PROVIDER_OPENAI = "openai"
PROVIDER_CLAUDE = "claude"
PROVIDERS = (PROVIDER_GEMINI, PROVIDER_OPENAI, PROVIDER_CLAUDE)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_OPENAI_MODEL = "gpt-4o"
DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-5-20250929"
CLAUDE_MAX_TOKENS = 4096
CLAUDE_TOOL_NAME = "record_bingo_output"
CLAUDE_TOOL_DESCRIPTION = "Record the structured answer for the bingo generator."

# Environment variable names
ENV_PROVIDER = "BINGO_PROVIDER"
ENV_GEMINI_API_KEY = "GEMINI_API_KEY"
ENV_LEGACY_API_KEY = "API_KEY"
ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_ANTHROPIC_API_KEY = "ANTHROPIC_API_KEY"

# API key validation
UNDEFINED_KEY = "undefined"
API_KEY_PLACEHOLDERS = ("YOUR_API_KEY", "your-api-key-here", "PLACEHOLDER")

# Image input
DATA_URL_FALLBACK_MIME = "image/jpeg"

# Item generation
DEFAULT_ITEM_COUNT = 25
ITEM_ID_FORMAT = "item-%d"
ITEM_SENTINEL = "Fout"
FALLBACK_SUBJECT = "Algemeen"
JSON_MIME_TYPE = "application/json"

# Log / user-facing messages
MSG_ROUTING_BACKEND = "→ %s (%s)"
MSG_ERR_API_KEY = "API Key ontbreekt of is ongeldig. Controleer %s."
MSG_ERR_PROVIDER = "Onbekende provider %r — kies uit: %s"
MSG_ERR_ITEM_COUNT = "BINGO_ITEM_COUNT moet een positief geheel getal zijn, niet %r"
MSG_ERR_GENERATION = "Kon geen items genereren: %s"
MSG_ERR_EMPTY_REPLY = "Geen tekst ontvangen van AI"
MSG_ERR_NO_ITEMS = "Antwoord bevat geen items"
MSG_ERR_SUBJECT_EMPTY = "Geen antwoord van AI (Leeg)"
MSG_ERR_SUBJECT_SHAPE = "Onverwacht antwoord bij vakherkenning: %r"
MSG_SUBJECT_FALLBACK = "Subject detection failed, using fallback: %s"
MSG_SUBJECT_DETECTED = "Detected subject %r (math=%s)"
MSG_ITEMS_GENERATED = "Generated %d bingo items"
MSG_NEED_INPUT = "geef een --topic, een --image of allebei"
MSG_ERR_CLI_COUNT = "--count moet positief zijn, niet %d"
MSG_ERR_IMAGE_UNREADABLE = "kan afbeelding niet lezen: %s"
MSG_ERR_COUNT = "count must be positive, got %r"
MSG_GENERATION_FAILED = "Error generating bingo items: %s"

# Prompt templates (Dutch, to match the fallback/sentinel vocabulary)
SUBJECT_PROMPT = (
    'Analyseer de input (tekst: "%(topic)s") en/of de afbeelding.\n\n'
    "1. Bepaal het schoolvak (bijv. Wiskunde, Geschiedenis).\n"
    "2. Zet 'isMath' op true ALLEEN als het Wiskunde of een vak met formules is "
    "(LaTeX nodig).\n\n"
)

FORMAT_MATH = (
    "NOTATIE (WISKUNDE):\n"
    "- Gebruik LaTeX code voor symbolen in zowel 'problem' als 'answer'.\n"
    "- GEEN dollartekens ($) rondom de formules.\n"
    "- Gebruik \\times voor keer, \\frac{a}{b} voor breuken.\n"
    "- Wijk NIET af van deze notatie.\n"
)

FORMAT_TEXT = (
    "NOTATIE (TEKST):\n"
    "- Gebruik GEEN LaTeX en geen andere opmaak. Gewone tekst.\n"
    "- 'problem': De vraag/omschrijving die de leraar voorleest.\n"
    "- 'answer': Het KORTE antwoord (1-4 woorden).\n"
)

SYSTEM_PROMPT = (
    "Je bent een docent voor het vak %(subject)s.\n"
    "Genereer output voor een Bingo spel.\n"
    "%(format)s"
    "Variatie: Zorg voor minimaal %(count)d unieke antwoorden.\n"
)

USER_PROMPT_EXACT = (
    "Maak een lijst van PRECIES %(count)d items. EXTRACTIE: Neem inhoud EXACT over "
    "uit de afbeelding. Als er minder dan %(count)d items op de afbeelding staan, "
    "genereer dan ZELF extra items in dezelfde stijl om aan het totaal te komen."
)
USER_PROMPT_SIMILAR = (
    "Genereer %(count)d NIEUWE unieke items die qua stijl en niveau lijken op de "
    "afbeelding."
)
USER_PROMPT_TOPIC = (
    'Onderwerp: "%(topic)s". Genereer precies %(count)d unieke items '
    "(vraag + antwoord)."
)
