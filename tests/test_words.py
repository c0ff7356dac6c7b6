"""Tests for word list API endpoints."""

import json

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from wordbook.application.vocabulary.exceptions import PersistenceError
from wordbook.infrastructure.vocabulary.storage.in_memory_storage import InMemoryWordStorage

WORDS_URL = "/api/v1/words"


def _add(client: TestClient, english: str, chinese: str) -> dict:
    response = client.post(WORDS_URL, json={"english": english, "chinese": chinese})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["word"]


class TestAddWord:
    """Test suite for POST /words."""

    def test_add_word_success(self, client: TestClient, storage: InMemoryWordStorage) -> None:
        response = client.post(WORDS_URL, json={"english": " apple ", "chinese": "苹果"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        assert data["word"]["english"] == "apple"
        assert data["word"]["chinese"] == "苹果"
        assert data["word"]["id"]

        stored = json.loads(storage.items["vocabularyWords"])
        assert stored[0]["english"] == "apple"
        assert "createdAt" in stored[0]

    def test_add_duplicate_ignoring_case(self, client: TestClient) -> None:
        _add(client, "Apple", "苹果")

        response = client.post(WORDS_URL, json={"english": "APPLE", "chinese": "又一个"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert "APPLE" in response.json()["detail"]
        assert client.get(WORDS_URL).json()["total"] == 1

    def test_add_blank_field(self, client: TestClient) -> None:
        response = client.post(WORDS_URL, json={"english": "   ", "chinese": "苹果"})
        assert response.status_code == 422

    def test_add_missing_field(self, client: TestClient) -> None:
        response = client.post(WORDS_URL, json={"english": "apple"})
        assert response.status_code == 422


class TestListWords:
    def test_list_in_insertion_order(self, client: TestClient) -> None:
        _add(client, "banana", "香蕉")
        _add(client, "apple", "苹果")

        data = client.get(WORDS_URL).json()
        assert [word["english"] for word in data["words"]] == ["banana", "apple"]
        assert data["total"] == 2
        assert data["matched"] == 2

    def test_search(self, client: TestClient) -> None:
        _add(client, "Apple", "苹果")
        _add(client, "pineapple", "菠萝")
        _add(client, "pear", "梨")

        data = client.get(WORDS_URL, params={"q": "apple"}).json()
        assert [word["english"] for word in data["words"]] == ["Apple", "pineapple"]
        assert data["matched"] == 2
        assert data["total"] == 3

        data = client.get(WORDS_URL, params={"q": "梨"}).json()
        assert [word["english"] for word in data["words"]] == ["pear"]

    def test_empty(self, client: TestClient) -> None:
        data = client.get(WORDS_URL).json()
        assert data == {"words": [], "total": 0, "matched": 0}


class TestGetAndDeleteWord:
    def test_get_word(self, client: TestClient) -> None:
        word = _add(client, "apple", "苹果")

        response = client.get(f"{WORDS_URL}/{word['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["english"] == "apple"

    def test_get_unknown_word(self, client: TestClient) -> None:
        response = client.get(f"{WORDS_URL}/missing")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_word(self, client: TestClient) -> None:
        apple = _add(client, "apple", "苹果")
        _add(client, "pear", "梨")

        response = client.delete(f"{WORDS_URL}/{apple['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert [w["english"] for w in client.get(WORDS_URL).json()["words"]] == ["pear"]

    def test_delete_unknown_word_succeeds(self, client: TestClient) -> None:
        _add(client, "apple", "苹果")

        response = client.delete(f"{WORDS_URL}/missing")
        assert response.status_code == status.HTTP_200_OK
        assert client.get(WORDS_URL).json()["total"] == 1

    def test_clear_words(self, client: TestClient) -> None:
        _add(client, "apple", "苹果")
        _add(client, "pear", "梨")

        response = client.delete(WORDS_URL)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Deleted 2 words"
        assert client.get(WORDS_URL).json()["total"] == 0


class TestImportExport:
    def test_import(self, client: TestClient) -> None:
        _add(client, "apple", "苹果")

        response = client.post(
            f"{WORDS_URL}/import",
            json={"text": "APPLE,苹果\nbanana,香蕉\n\nbad line\nfine, it's okay, really\nBanana,x"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["imported"] == 2
        words = client.get(WORDS_URL).json()["words"]
        assert [(w["english"], w["chinese"]) for w in words] == [
            ("apple", "苹果"),
            ("banana", "香蕉"),
            ("fine", "it's okay, really"),
        ]

    def test_import_nothing(self, client: TestClient, storage: InMemoryWordStorage) -> None:
        response = client.post(f"{WORDS_URL}/import", json={"text": "no pairs here"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["imported"] == 0
        assert storage.save_count == 0

    def test_export(self, client: TestClient) -> None:
        _add(client, "apple", "苹果")
        _add(client, "fine", "it's okay, really")

        response = client.get(f"{WORDS_URL}/export")

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "apple,苹果\nfine,it's okay, really"
        assert response.headers["content-type"].startswith("text/plain")
        assert 'filename="vocabulary_words.txt"' in response.headers["content-disposition"]

    def test_export_empty(self, client: TestClient) -> None:
        response = client.get(f"{WORDS_URL}/export")
        assert response.status_code == status.HTTP_200_OK
        assert response.text == ""


class TestStartupLoad:
    @pytest.fixture
    def storage(self) -> InMemoryWordStorage:
        storage = InMemoryWordStorage()
        storage.items["vocabularyWords"] = json.dumps(
            [
                {
                    "id": "1700000000000",
                    "english": "apple",
                    "chinese": "苹果",
                    "createdAt": "2023-11-14T22:13:20.000Z",
                },
                {"id": "1700000000001", "english": "", "chinese": "空"},
            ]
        )
        return storage

    def test_existing_words_are_loaded(self, client: TestClient) -> None:
        response = client.get(f"{WORDS_URL}/1700000000000")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["chinese"] == "苹果"
        assert client.get(WORDS_URL).json()["total"] == 1


class ReadOnlyStorage(InMemoryWordStorage):
    async def save(self, records: list[dict]) -> None:
        raise PersistenceError("Storage is read-only")


class TestStorageFailure:
    @pytest.fixture
    def storage(self) -> InMemoryWordStorage:
        return ReadOnlyStorage()

    def test_failed_save_is_reported_and_rolled_back(self, client: TestClient) -> None:
        response = client.post(WORDS_URL, json={"english": "apple", "chinese": "苹果"})

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["detail"] == "Storage is read-only"
        assert client.get(WORDS_URL).json()["total"] == 0

    def test_failed_import_adds_nothing(self, client: TestClient) -> None:
        response = client.post(f"{WORDS_URL}/import", json={"text": "apple,苹果"})

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert client.get(WORDS_URL).json()["total"] == 0
