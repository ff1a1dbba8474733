"""how-person: tech stack and personality summaries from public profiles."""

__version__ = "0.1.0"
