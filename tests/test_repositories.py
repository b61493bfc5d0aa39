from tac_assistant.repositories.transcript import (
    FileTranscriptRepository,
    InMemoryTranscriptRepository,
)


def test_in_memory_repository_accumulates():
    repo = InMemoryTranscriptRepository()

    assert repo.load() == ""
    repo.append("a")
    repo.append("b")

    assert repo.load() == "ab"


def test_file_repository_missing_file_loads_empty(tmp_path):
    repo = FileTranscriptRepository(tmp_path / "output.txt")

    assert repo.load() == ""
    assert not (tmp_path / "output.txt").exists()


def test_file_repository_appends_and_survives_new_instance(tmp_path):
    path = tmp_path / "output.txt"
    FileTranscriptRepository(path).append("\n# Commands to execute:\nshow clock")
    FileTranscriptRepository(path).append("\n# Results:\n12:00")

    assert FileTranscriptRepository(path).load() == (
        "\n# Commands to execute:\nshow clock\n# Results:\n12:00"
    )
