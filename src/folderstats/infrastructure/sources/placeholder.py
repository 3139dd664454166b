"""Text source that synthesizes folder text without any I/O."""


class PlaceholderTextSource:
    """Returns a fixed descriptive string for every folder."""

    async def resolve(self, folder_id: str) -> str:
        return f"Text data from {folder_id}"
