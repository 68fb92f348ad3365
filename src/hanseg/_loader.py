"""Dictionary loading: plain-text word/char files and checksummed msgpack bundles."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import msgpack
from loguru import logger

from ._errors import (
    DictionaryUnavailableError,
    HansegChecksumError,
    HansegVersionError,
)
from ._freq import FrequencyTable
from ._trie import Dictionary

_EXPECTED_VERSION = "1.0"

_WHITESPACE = "\r\n \t"

_WORDS_FILE = "words.bin"
_CHARS_FILE = "chars.bin"
_DATA_FILES = (_WORDS_FILE, _CHARS_FILE)


def _read_lines(path: Path) -> list[str]:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().splitlines()
    except FileNotFoundError:
        raise DictionaryUnavailableError(f"File not found: {path}") from None
    except UnicodeDecodeError as e:
        raise DictionaryUnavailableError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise DictionaryUnavailableError(f"Cannot read {path}: {e}") from e


def read_words(path: Path | str) -> Dictionary:
    """Build a dictionary from a file with one word per line.

    Surrounding whitespace is trimmed and blank lines are skipped.
    """
    path = Path(path)
    dictionary = Dictionary()
    for line in _read_lines(path):
        dictionary.insert(line.strip(_WHITESPACE))
    if len(dictionary) == 0:
        raise DictionaryUnavailableError(f"No words in {path}")
    return dictionary


def read_char_freqs(path: Path | str) -> FrequencyTable:
    """Build a frequency table from ``<char> <count>`` lines.

    Lines without a space are ignored. Only the first character of the
    character field is kept; the first count seen for a character wins.
    """
    path = Path(path)
    freqs = FrequencyTable()
    for lineno, line in enumerate(_read_lines(path), 1):
        s = line.strip(_WHITESPACE)
        pos = s.find(" ")
        if pos <= 0:
            # No separator, or an empty character field
            continue
        try:
            count = int(s[pos + 1:])
        except ValueError:
            raise DictionaryUnavailableError(
                f"{path}:{lineno}: bad frequency {s[pos + 1:]!r}"
            ) from None
        try:
            freqs.add(s[:pos], count)
        except ValueError as e:
            raise DictionaryUnavailableError(f"{path}:{lineno}: {e}") from e
    return freqs


def load_text(
    words_path: Path | str, chars_path: Path | str | None = None
) -> tuple[Dictionary, FrequencyTable]:
    """Load a word list and an optional char frequency file."""
    dictionary = read_words(words_path)
    freqs = read_char_freqs(chars_path) if chars_path is not None else FrequencyTable()
    logger.info(
        "Loaded dictionary: {} words, {} chars", len(dictionary), len(freqs)
    )
    return dictionary, freqs


# -- Compiled bundles --


def _read_manifest(data_dir: Path) -> dict[str, str]:
    """Check the manifest version and return its ``{filename: sha256}`` map."""
    manifest_path = data_dir / "manifest.json"
    try:
        with open(manifest_path, encoding="utf-8") as f:
            manifest = json.load(f)
    except FileNotFoundError:
        raise DictionaryUnavailableError(
            f"manifest.json not found in {data_dir}"
        ) from None
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise DictionaryUnavailableError(f"{manifest_path} is not valid JSON: {e}") from e
    except OSError as e:
        raise DictionaryUnavailableError(f"Cannot read {manifest_path}: {e}") from e

    if not isinstance(manifest, dict):
        raise DictionaryUnavailableError(
            f"{manifest_path} must hold a JSON object, got {type(manifest).__name__}"
        )
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise HansegVersionError(
            f"Expected bundle version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    files = manifest.get("files", {})
    if not isinstance(files, dict):
        raise DictionaryUnavailableError(f"{manifest_path}: 'files' must be an object")
    return files


def _read_verified(data_dir: Path, filename: str, checksums: dict[str, str]) -> bytes:
    """Read one bundle file and check it against the manifest digest."""
    expected = checksums.get(filename)
    if not isinstance(expected, str):
        raise DictionaryUnavailableError(f"No checksum in manifest for {filename}")
    path = data_dir / filename
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise DictionaryUnavailableError(f"Missing bundle file: {path}") from None
    except OSError as e:
        raise DictionaryUnavailableError(f"Cannot read {path}: {e}") from e
    actual = hashlib.sha256(data).hexdigest()
    if actual != expected:
        raise HansegChecksumError(
            f"Checksum mismatch for {filename}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )
    return data


def _unpack(data: bytes, path: Path) -> Any:
    try:
        return msgpack.unpackb(data, raw=False)
    except (msgpack.UnpackException, ValueError, TypeError) as e:
        raise DictionaryUnavailableError(f"{path} is not valid msgpack: {e}") from e


def load_bundle(data_dir: Path | str) -> tuple[Dictionary, FrequencyTable]:
    """Load and validate a bundle written by :func:`dump_bundle`.

    Every file is checksummed before anything is decoded.
    """
    data_dir = Path(data_dir)
    checksums = _read_manifest(data_dir)
    raw = {name: _read_verified(data_dir, name, checksums) for name in _DATA_FILES}

    words = _unpack(raw[_WORDS_FILE], data_dir / _WORDS_FILE)
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise DictionaryUnavailableError(f"{data_dir / _WORDS_FILE}: expected a list of words")
    dictionary = Dictionary.from_words(words)
    if len(dictionary) == 0:
        raise DictionaryUnavailableError(f"No words in {data_dir}")

    chars = _unpack(raw[_CHARS_FILE], data_dir / _CHARS_FILE)
    if not isinstance(chars, dict):
        raise DictionaryUnavailableError(f"{data_dir / _CHARS_FILE}: expected a char map")
    try:
        freqs = FrequencyTable(chars.items())
    except (ValueError, TypeError) as e:
        raise DictionaryUnavailableError(f"{data_dir / _CHARS_FILE}: {e}") from e

    logger.info(
        "Loaded bundle {}: {} words, {} chars",
        data_dir, len(dictionary), len(freqs),
    )
    return dictionary, freqs


def dump_bundle(
    dictionary: Dictionary, freqs: FrequencyTable, out_dir: Path | str
) -> Path:
    """Write ``dictionary`` and ``freqs`` as a checksummed msgpack bundle.

    Raises:
        ValueError: If the dictionary has no words.
    """
    if len(dictionary) == 0:
        raise ValueError("refusing to write a bundle with no words")
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    payloads = {
        _WORDS_FILE: msgpack.packb(list(dictionary), use_bin_type=True),
        _CHARS_FILE: msgpack.packb(dict(freqs), use_bin_type=True),
    }
    for filename, data in payloads.items():
        (out_dir / filename).write_bytes(data)
    manifest = {
        "version": _EXPECTED_VERSION,
        "files": {
            name: hashlib.sha256(data).hexdigest()
            for name, data in payloads.items()
        },
    }
    with open(out_dir / "manifest.json", "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    logger.info("Wrote bundle {}: {} words", out_dir, len(dictionary))
    return out_dir
