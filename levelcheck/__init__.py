"""English level test: grammar, writing, listening and speaking sections combined into a CEFR level."""

__version__ = "0.1.0"