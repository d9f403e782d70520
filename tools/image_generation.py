from typing import Optional

from langchain_community.utilities.dalle_image_generator import DallEAPIWrapper
from langchain_core.tools import Tool

DALLE_MODEL = "dall-e-3"


def dalle_tool(api_key: Optional[str] = None) -> Tool:
    """Image generation tool backed by DALL-E. Returns the URL of the generated image."""
    wrapper_kwargs = {"model": DALLE_MODEL, "n": 1}
    if api_key:
        wrapper_kwargs["api_key"] = api_key
    dalle = DallEAPIWrapper(**wrapper_kwargs)

    return Tool(
        name="dall_e_image_generator",
        description=(
            "Generate an image from a text description using DALL-E. "
            "Input should be a detailed image prompt. Returns the image URL."
        ),
        func=dalle.run,
    )
