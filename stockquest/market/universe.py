"""Starting instrument set for a new session."""

from stockquest.models import Instrument

_UNIVERSE = [
    {
        "symbol": "NOVA",
        "name": "NovaTech Systems",
        "price": 182.50,
        "sector": "Technology",
        "volatility": 0.025,
        "description": "Builds cloud software for small businesses.",
    },
    {
        "symbol": "PIXL",
        "name": "Pixel Forge",
        "price": 64.20,
        "sector": "Technology",
        "volatility": 0.04,
        "description": "Makes graphics chips for games and AI workloads.",
    },
    {
        "symbol": "MEDI",
        "name": "MediCore Health",
        "price": 121.75,
        "sector": "Healthcare",
        "volatility": 0.015,
        "description": "Runs a network of clinics and pharmacies.",
    },
    {
        "symbol": "GENX",
        "name": "GenEx Biolabs",
        "price": 38.90,
        "sector": "Healthcare",
        "volatility": 0.05,
        "description": "Research-stage biotech working on gene therapies.",
    },
    {
        "symbol": "BANK",
        "name": "Harbor Bank",
        "price": 47.30,
        "sector": "Finance",
        "volatility": 0.012,
        "description": "Regional bank offering loans and savings accounts.",
    },
    {
        "symbol": "SUNR",
        "name": "SunRise Energy",
        "price": 29.15,
        "sector": "Energy",
        "volatility": 0.03,
        "description": "Installs and operates solar farms.",
    },
    {
        "symbol": "OILX",
        "name": "Petrox Oil",
        "price": 88.60,
        "sector": "Energy",
        "volatility": 0.02,
        "description": "Explores for and refines crude oil.",
    },
    {
        "symbol": "SHOP",
        "name": "Corner Market",
        "price": 56.40,
        "sector": "Consumer",
        "volatility": 0.01,
        "description": "Grocery chain with stores in every town.",
    },
]


def default_instruments() -> list[Instrument]:
    """Create the instruments a new session starts with."""
    return [Instrument(**fields) for fields in _UNIVERSE]
