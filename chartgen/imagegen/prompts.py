"""Prompt templates for AI chart image generation."""


def build_primary_prompt(data: str, chart_type: str) -> str:
    """Detailed prompt for the multimodal model."""
    return f"""Generate a beautiful, professional {chart_type} chart visualization for this data:

{data}

Create a visually stunning chart with:
- Clear labels and legends
- Professional color scheme (blues, purples, gradients)
- Clean modern design
- Dark theme background (#1e293b)
- White/light text for contrast

Generate this as an actual image, not code or text description."""


def build_fallback_prompt(data: str, chart_type: str, max_chars: int = 200) -> str:
    """Short fixed prompt for the image model, quoting the start of the data."""
    return (
        f"A professional {chart_type} chart showing: {data[:max_chars]}. "
        "Clean modern design, dark background, vibrant colors, clear labels."
    )
