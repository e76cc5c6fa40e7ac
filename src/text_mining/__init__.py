from .config import TextMiningConfig, load_text_mining_config
from .engine import TextMiningEngine

__all__ = ["TextMiningConfig", "TextMiningEngine", "load_text_mining_config"]
