"""Personal journaling backend with LLM-generated insight summaries."""
