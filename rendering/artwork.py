"""
Album artwork loader for Deck Jockey
Loads art URLs reported by the player (file:// or http(s)://)
"""

import io
from urllib.parse import urlparse, unquote

import requests
from PIL import Image

from config.settings import ARTWORK_TIMEOUT
from core.errors import RenderError


class ArtworkLoader:
    """Loads artwork and remembers the last image it loaded"""

    def __init__(self, timeout=ARTWORK_TIMEOUT, session=None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.last_reference = None
        self.last_image = None

    def load(self, reference):
        """
        Load the image behind an artwork reference

        Args:
            reference: file:// URL, http(s):// URL, plain path, or None

        Returns:
            PIL.Image in RGB mode, or None when reference is empty

        Raises:
            RenderError: the image could not be fetched or decoded
        """
        if not reference:
            return None

        # Players report the same URL every second; reuse the decoded image
        if reference == self.last_reference and self.last_image is not None:
            return self.last_image

        data = self._read(reference)
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
            image = image.convert('RGB')
        except (OSError, Image.DecompressionBombError) as e:
            raise RenderError(f"Could not decode artwork {reference}: {e}") from e

        self.last_reference = reference
        self.last_image = image
        return image

    def _read(self, reference):
        parsed = urlparse(reference)

        if parsed.scheme in ('http', 'https'):
            try:
                response = self.session.get(reference, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                raise RenderError(f"Could not download artwork {reference}: {e}") from e
            return response.content

        if parsed.scheme == 'file':
            path = unquote(parsed.path)
        elif parsed.scheme == '':
            path = reference
        else:
            raise RenderError(f"Unsupported artwork URL scheme: {parsed.scheme}")

        try:
            with open(path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise RenderError(f"Could not read artwork {path}: {e}") from e
