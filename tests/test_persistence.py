"""Tests for the on-disk artifact tier."""

from plays_mcp.library import ArtifactStore, ModelJsonCodec, PersistOutcome, ProbeMode
from plays_mcp.plays import Act, Play, Scene, Speech


def _play() -> Play:
    return Play(
        title="The Tempest",
        personae=["PROSPERO, the right Duke of Milan."],
        acts=[
            Act(
                title="ACT I",
                scenes=[
                    Scene(
                        title="SCENE I.  On a ship at sea.",
                        speeches=[Speech(speakers=["Master"], lines=["Boatswain!"])],
                    )
                ],
            )
        ],
    )


class ExplodingCodec(ModelJsonCodec):
    def __init__(self):
        super().__init__(Play)

    def serialize(self, document, path):
        with open(path, "w", encoding="utf-8") as f:
            f.write("{partial")
        raise RuntimeError("disk full")


def test_artifact_path_uses_key_and_suffix(tmp_path):
    store = ArtifactStore(tmp_path)
    assert store.artifact_path("hamlet") == tmp_path / "hamlet.json"
    assert ArtifactStore(tmp_path, suffix=".p").artifact_path("hamlet") == tmp_path / "hamlet.p"


def test_read_probe_without_artifact(tmp_path):
    assert ArtifactStore(tmp_path).probe("hamlet", ProbeMode.READ) is None


def test_read_probe_with_missing_directory(tmp_path):
    assert ArtifactStore(tmp_path / "absent").probe("hamlet", ProbeMode.READ) is None


def test_write_probe_creates_file(tmp_path):
    store = ArtifactStore(tmp_path)
    path = store.probe("hamlet", ProbeMode.WRITE)

    assert path == tmp_path / "hamlet.json"
    assert path.is_file()
    assert path.stat().st_size == 0


def test_write_probe_unwritable_location(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    assert ArtifactStore(blocker / "parse").probe("hamlet", ProbeMode.WRITE) is None


def test_write_then_read(tmp_path):
    store = ArtifactStore(tmp_path)
    codec = ModelJsonCodec(Play)
    play = _play()

    assert store.write("tempest", play, codec) is PersistOutcome.WRITTEN
    assert store.read("tempest", codec) == play


def test_write_skips_existing_artifact(tmp_path):
    store = ArtifactStore(tmp_path)
    codec = ModelJsonCodec(Play)
    store.write("tempest", _play(), codec)
    before = store.artifact_path("tempest").read_text(encoding="utf-8")

    changed = _play().model_copy(update={"title": "Changed"})
    assert store.write("tempest", changed, codec) is PersistOutcome.SKIPPED_EXISTS
    assert store.artifact_path("tempest").read_text(encoding="utf-8") == before


def test_write_to_unwritable_location(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = ArtifactStore(blocker / "parse")

    assert store.write("tempest", _play(), ModelJsonCodec(Play)) is PersistOutcome.SKIPPED_UNWRITABLE


def test_codec_failure_removes_partial_artifact(tmp_path):
    store = ArtifactStore(tmp_path)

    assert store.write("tempest", _play(), ExplodingCodec()) is PersistOutcome.FAILED
    assert not store.artifact_path("tempest").exists()


def test_corrupt_artifact_reads_as_absent(tmp_path):
    store = ArtifactStore(tmp_path)
    store.artifact_path("tempest").write_text("{not json", encoding="utf-8")
    assert store.read("tempest", ModelJsonCodec(Play)) is None


def test_ensure_base_dir(tmp_path):
    assert ArtifactStore(tmp_path / "a" / "b").ensure_base_dir() is True
    assert (tmp_path / "a" / "b").is_dir()

    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    assert ArtifactStore(blocker / "parse").ensure_base_dir() is False


def test_empty_artifact_from_interrupted_write_is_replaced(tmp_path):
    store = ArtifactStore(tmp_path)
    codec = ModelJsonCodec(Play)
    store.artifact_path("tempest").touch()

    assert store.read("tempest", codec) is None
    assert store.write("tempest", _play(), codec) is PersistOutcome.WRITTEN
    assert store.read("tempest", codec) == _play()
