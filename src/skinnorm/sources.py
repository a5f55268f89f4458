import base64
import io
import json
import logging
import os
import re
import requests
from PIL import Image

from . import config
from .exceptions import SkinSourceError

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]{3,16}$")


class TextureSource:

    @staticmethod
    def load(source: str, texture: str = "SKIN") -> Image.Image:
        """
        Loads a texture from a file path, URL, or Minecraft username.
        texture selects "SKIN" or "CAPE" when resolving a username.
        """
        if os.path.exists(source):
            return TextureSource._load_from_file(source)
        elif source.startswith("http://") or source.startswith("https://"):
            return TextureSource._load_from_url(source)
        elif USERNAME_PATTERN.match(source):
            return TextureSource._load_from_username(source, texture)
        else:
            raise SkinSourceError(f"Invalid texture source: {source}")

    @staticmethod
    def _load_from_file(path: str) -> Image.Image:
        try:
            img = Image.open(path)
            img.load()  # Force load, the file handle is released afterwards
        except (OSError, Image.DecompressionBombError) as e:
            raise SkinSourceError(f"Failed to load texture from file: {e}") from e
        return TextureSource._to_rgba(img)

    @staticmethod
    def _load_from_url(url: str) -> Image.Image:
        logger.debug("Fetching texture from %s", url)
        try:
            response = requests.get(url, timeout=config.REQUEST_TIMEOUT)
            response.raise_for_status()
            img = Image.open(io.BytesIO(response.content))
            img.load()
        except requests.RequestException as e:
            raise SkinSourceError(f"Failed to load texture from URL: {e}") from e
        except (OSError, Image.DecompressionBombError) as e:
            raise SkinSourceError(f"URL did not return a readable image: {e}") from e
        return TextureSource._to_rgba(img)

    @staticmethod
    def _load_from_username(username: str, texture: str) -> Image.Image:
        # 1. Get UUID
        uuid = TextureSource._get_json(config.MOJANG_PROFILE_URL.format(username), username).get("id")
        if not uuid:
            raise SkinSourceError(f"User not found: {username}")

        # 2. Get Profile (texture URLs)
        properties = TextureSource._get_json(config.MOJANG_SESSION_URL.format(uuid), username).get("properties", [])

        texture_data = None
        for prop in properties:
            if prop.get("name") == "textures":
                texture_data = prop.get("value")
                break

        if not texture_data:
            raise SkinSourceError(f"No texture data found for user '{username}'")

        try:
            texture_json = json.loads(base64.b64decode(texture_data).decode("utf-8"))
        except ValueError as e:
            raise SkinSourceError(f"Malformed texture data for user '{username}': {e}") from e

        url = texture_json.get("textures", {}).get(texture, {}).get("url")
        if not url:
            raise SkinSourceError(f"No {texture.lower()} URL found for user '{username}'")

        return TextureSource._load_from_url(url)

    @staticmethod
    def _get_json(url: str, username: str) -> dict:
        try:
            resp = requests.get(url, timeout=config.REQUEST_TIMEOUT)
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as e:
            raise SkinSourceError(f"Failed to fetch profile for user '{username}': {e}") from e

    @staticmethod
    def _to_rgba(img: Image.Image) -> Image.Image:
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        return img
