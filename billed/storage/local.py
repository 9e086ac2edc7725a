from pathlib import Path

from billed.storage.base import ProofStorage


class LocalProofStorage(ProofStorage):
    """Proofs on the local disk, addressed by ``file://`` URLs."""

    def __init__(self, base_dir: str, prefix: str = "") -> None:
        super().__init__(prefix)
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _write(self, key: str, content: bytes, media_type: str) -> str:
        path = self.base_dir / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path.resolve().as_uri()
