"""
Tests for CharacterService file persistence
"""
import asyncio
import json
import os
import stat
from unittest.mock import patch

import pytest

from exceptions import StoreWriteError
from models.character import Character, CharacterStore
from services.character_service import CharacterService

PAUL_ROBERTS = {
    "characters": [
        {
            "name": "Paul Roberts",
            "stats": {
                "intelligence": 1,
                "wits": 3,
                "resolve": 3,
                "strength": 3,
                "dexterity": 3,
                "stamina": 2,
                "presence": 2,
                "manipulation": 1,
                "composure": 3,
                "academics": 0
            }
        }
    ]
}


class TestCharacterServiceLoad:
    """Test loading the store from disk."""

    def test_missing_file_is_empty_store(self, tmp_path):
        service = CharacterService(data_file=tmp_path / "missing.json")
        store = service.load()
        assert len(store) == 0

    def test_corrupt_file_is_empty_store(self, tmp_path):
        data_file = tmp_path / "data.json"
        data_file.write_text("{not json", encoding="utf-8")

        store = CharacterService(data_file=data_file).load()
        assert len(store) == 0

    def test_empty_file_is_empty_store(self, tmp_path):
        data_file = tmp_path / "data.json"
        data_file.write_text("", encoding="utf-8")

        store = CharacterService(data_file=data_file).load()
        assert len(store) == 0

    def test_wrong_shape_is_empty_store(self, tmp_path):
        data_file = tmp_path / "data.json"
        data_file.write_text('{"characters": [{"stats": {"wits": "lots"}}]}', encoding="utf-8")

        store = CharacterService(data_file=data_file).load()
        assert len(store) == 0

    def test_load_existing_store(self, tmp_path):
        data_file = tmp_path / "data.json"
        data_file.write_text(json.dumps(PAUL_ROBERTS, indent=4), encoding="utf-8")

        store = CharacterService(data_file=data_file).load()

        assert len(store) == 1
        assert len(store.characters[0].stats) == 10
        assert store.get("Paul Roberts").get_value("wits") == (True, 3)

    def test_default_path_comes_from_config(self, tmp_path, monkeypatch):
        data_file = tmp_path / "configured.json"
        monkeypatch.setenv("DATA_FILE", str(data_file))

        service = CharacterService()
        assert service.data_file == data_file


class TestCharacterServiceSave:
    """Test writing the store to disk."""

    def test_save_writes_compact_json(self, tmp_path):
        data_file = tmp_path / "output.json"
        character = Character(name="A")
        character.set_value("a", 100)

        CharacterService(data_file=data_file).save(CharacterStore(characters=[character]))

        assert data_file.read_text(encoding="utf-8") == '{"characters":[{"name":"A","stats":{"a":100}}]}'

    def test_save_then_load(self, character_service):
        store = CharacterStore()
        store.get_or_create("Paul").set_value("strength", 3)
        store.get_or_create("Jess").set_value("wits", 2)

        character_service.save(store)
        reloaded = character_service.load()

        assert reloaded.get("Paul").get_value("strength") == (True, 3)
        assert reloaded.get("Jess").get_value("wits") == (True, 2)

    def test_save_creates_parent_directory(self, tmp_path):
        data_file = tmp_path / "nested" / "data.json"
        CharacterService(data_file=data_file).save(CharacterStore())
        assert data_file.exists()

    def test_failed_write_keeps_previous_file(self, tmp_path):
        data_file = tmp_path / "data.json"
        original = json.dumps(PAUL_ROBERTS)
        data_file.write_text(original, encoding="utf-8")
        service = CharacterService(data_file=data_file)

        store = service.load()
        store.get_or_create("Paul Roberts").set_value("wits", 5)

        with patch('services.character_service.os.replace', side_effect=OSError("disk full")):
            with pytest.raises(StoreWriteError):
                service.save(store)

        assert data_file.read_text(encoding="utf-8") == original
        # No temporary files left behind
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_save_keeps_existing_permissions(self, tmp_path):
        data_file = tmp_path / "data.json"
        data_file.write_text(json.dumps(PAUL_ROBERTS), encoding="utf-8")
        os.chmod(data_file, 0o644)
        service = CharacterService(data_file=data_file)

        service.save(service.load())

        assert stat.S_IMODE(data_file.stat().st_mode) == 0o644


class TestCharacterServiceOperations:
    """Test character lookups and stat edits."""

    def test_unknown_character_is_not_persisted(self, character_service):
        character = character_service.get_character("Nobody")

        assert character.name == "Nobody"
        assert character.stats == {}
        assert not character_service.data_file.exists()

    def test_get_character_is_exact_name(self, character_service):
        store = CharacterStore()
        store.get_or_create("Paul").set_value("wits", 3)
        character_service.save(store)

        assert character_service.get_character("Paul").get_value("wits") == (True, 3)
        assert character_service.get_character("paul").get_value("wits") == (False, 0)

    @pytest.mark.asyncio
    async def test_set_stat_persists(self, character_service):
        character = await character_service.set_stat("Paul", "Strength", 3)

        assert character.get_value("strength") == (True, 3)
        reloaded = character_service.load()
        assert reloaded.get("Paul").stats == {"strength": 3}

    @pytest.mark.asyncio
    async def test_set_stat_keeps_other_characters(self, character_service):
        await character_service.set_stat("Paul", "wits", 3)
        await character_service.set_stat("Jess", "wits", 1)
        await character_service.set_stat("Paul", "wits", 4)

        store = character_service.load()
        assert len(store) == 2
        assert store.get("Paul").get_value("wits") == (True, 4)
        assert store.get("Jess").get_value("wits") == (True, 1)

    @pytest.mark.asyncio
    async def test_set_stat_write_failure_raises(self, character_service):
        with patch('services.character_service.os.replace', side_effect=OSError("read-only")):
            with pytest.raises(StoreWriteError):
                await character_service.set_stat("Paul", "wits", 3)

        assert not character_service.data_file.exists()

    @pytest.mark.asyncio
    async def test_concurrent_set_stat_keeps_every_edit(self, character_service):
        """Edits to one character made at the same time must all be saved."""
        stats = ["strength", "dexterity", "stamina", "wits", "resolve", "composure"]

        await asyncio.gather(*(
            character_service.set_stat("Paul", name, value)
            for value, name in enumerate(stats, start=1)
        ))

        saved = character_service.load().get("Paul")
        assert saved.stats == {name: value for value, name in enumerate(stats, start=1)}
