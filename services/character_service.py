"""
Character Service

Loads and saves the character store as a single JSON file.
"""
import asyncio
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional, Union

from config import get_config
from exceptions import StoreWriteError
from models.character import Character, CharacterStore

logger = logging.getLogger(f'{__name__}.CharacterService')


class CharacterService:
    """
    File-backed access to the character store.

    Features:
    - Whole-file JSON persistence, replaced atomically on save
    - Missing or corrupt files load as an empty store
    - Stat edits serialized through an asyncio lock (load, mutate, save)
    """

    def __init__(self, data_file: Optional[Union[str, Path]] = None):
        """
        Initialize the character service.

        Args:
            data_file: Path to the JSON data file (defaults to the configured data_file)
        """
        self._data_file = Path(data_file) if data_file is not None else None
        self._lock = asyncio.Lock()

    @property
    def data_file(self) -> Path:
        if self._data_file is None:
            return Path(get_config().data_file)
        return self._data_file

    def load(self) -> CharacterStore:
        """Load the store, falling back to an empty one."""
        try:
            content = self.data_file.read_text(encoding='utf-8')
        except FileNotFoundError:
            logger.info(f"No character data at {self.data_file}, starting fresh")
            return CharacterStore()
        except OSError as e:
            logger.warning(f"Could not read character data from {self.data_file}: {e}")
            return CharacterStore()

        try:
            store = CharacterStore.from_json(content)
        except ValueError as e:  # includes pydantic ValidationError
            logger.warning(f"Ignoring unparseable character data in {self.data_file}: {e}")
            return CharacterStore()

        logger.debug(f"Loaded {len(store)} characters from {self.data_file}")
        return store

    def save(self, store: CharacterStore) -> None:
        """
        Write the whole store, replacing the previous file.

        Raises:
            StoreWriteError: If the store cannot be serialized or written. The
                             previous file is left untouched in that case.
        """
        path = self.data_file
        try:
            content = store.to_json()
        except (ValueError, TypeError) as e:
            raise StoreWriteError(f"Could not serialize character data: {e}") from e

        temp_name = None
        try:
            directory = path.parent
            directory.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(dir=directory, prefix=f'.{path.name}.', suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            if path.exists():
                # mkstemp files are 0600; keep the permissions of the file being replaced
                os.chmod(temp_name, stat.S_IMODE(path.stat().st_mode))
            os.replace(temp_name, path)
        except OSError as e:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
            raise StoreWriteError(f"Could not write character data to {path}: {e}") from e

        logger.debug(f"Saved {len(store)} characters to {path}")

    def get_character(self, name: str) -> Character:
        """Get a character by exact name; unknown names get a fresh, unsaved character."""
        character = self.load().get(name)
        if character is None:
            return Character(name=name)
        return character

    async def set_stat(self, name: str, key: str, value: int) -> Character:
        """
        Set a stat on a character (creating the character if needed) and save.

        File reads and writes run in the default executor, so the lock keeps
        concurrent edits from interleaving between load and save.

        Raises:
            StoreWriteError: If the updated store cannot be written
        """
        loop = asyncio.get_running_loop()
        async with self._lock:
            store = await loop.run_in_executor(None, self.load)
            character = store.get_or_create(name)
            character.set_value(key, value)
            await loop.run_in_executor(None, self.save, store)

        logger.info(f"Set {key.lower()} = {value} for {name}")
        return character


# Global service instance
character_service = CharacterService()
