"""Domain constants for ledger classification."""

DRINK_KEYWORDS = (
    "getränk",
    "drink",
    "bier",
    "beer",
    "beverage",
    "trinken",
    "wasser",
    "water",
    "cola",
    "alkohol",
    "alcohol",
    "apfelwein",
    "appler",
    "äppler",
    "cidre",
    "cider",
)

APPLER_KEYWORDS = ("apfelwein", "appler", "äppler")

BEER_LEMONADE_KEYWORDS = (
    "bier",
    "beer",
    "pils",
    "weizen",
    "helles",
    "export",
    "radler",
    "alster",
    "limo",
    "lemonade",
    "cola",
    "fanta",
    "sprite",
    "wasser",
    "water",
)

BEVERAGE_CATEGORY_APPLER = "Appler"
BEVERAGE_CATEGORY_BEER_LEMONADE = "Beer/Lemonade"
BEVERAGE_CATEGORY_DEFAULT = "Beverages"

CREDIT_REST_MARKER = "guthaben rest"
CREDIT_MARKER = "guthaben"
DEPOSIT_PREFIX = "einzahlung"

INVALID_PLAYER_NAMES = ("unknown", "player unknown")


__all__ = [
    "DRINK_KEYWORDS",
    "APPLER_KEYWORDS",
    "BEER_LEMONADE_KEYWORDS",
    "BEVERAGE_CATEGORY_APPLER",
    "BEVERAGE_CATEGORY_BEER_LEMONADE",
    "BEVERAGE_CATEGORY_DEFAULT",
    "CREDIT_REST_MARKER",
    "CREDIT_MARKER",
    "DEPOSIT_PREFIX",
    "INVALID_PLAYER_NAMES",
]
