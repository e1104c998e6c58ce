"""Types shared by events in the *m.room* namespace."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .core import _json_kind, _object, _optional_string, _required, _string, _uint


def _optional_uint(data: Mapping[str, Any], name: str) -> int | None:
    value = data.get(name)
    return None if value is None else _uint(value, name)


def _bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"invalid type for `{name}`: {_json_kind(value)}, expected a boolean")
    return value


def _string_list(value: Any, name: str) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"invalid type for `{name}`: {_json_kind(value)}, expected a sequence")
    return [_string(item, name) for item in value]


def _drop_none(fields: dict[str, Any]) -> dict[str, Any]:
    return {name: value for name, value in fields.items() if value is not None}


@dataclass
class JsonWebKey:
    """A JSON Web Key object used for encrypted attachments."""

    kty: str
    key_ops: list[str]
    alg: str
    k: str
    ext: bool

    def to_json(self) -> dict[str, Any]:
        return {
            "kty": self.kty,
            "key_ops": list(self.key_ops),
            "alg": self.alg,
            "k": self.k,
            "ext": self.ext,
        }

    @classmethod
    def from_json(cls, data: Any) -> "JsonWebKey":
        mapping = _object(data)
        return cls(
            kty=_string(_required(mapping, "kty"), "kty"),
            key_ops=_string_list(_required(mapping, "key_ops"), "key_ops"),
            alg=_string(_required(mapping, "alg"), "alg"),
            k=_string(_required(mapping, "k"), "k"),
            ext=_bool(_required(mapping, "ext"), "ext"),
        )


@dataclass
class EncryptedFile:
    """A file sent to a room with end-to-end encryption enabled."""

    url: str
    key: JsonWebKey
    iv: str
    hashes: dict[str, str] = field(default_factory=dict)
    v: str = "v2"

    def to_json(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "key": self.key.to_json(),
            "iv": self.iv,
            "hashes": dict(self.hashes),
            "v": self.v,
        }

    @classmethod
    def from_json(cls, data: Any) -> "EncryptedFile":
        mapping = _object(data)
        hashes = _object(_required(mapping, "hashes"))
        return cls(
            url=_string(_required(mapping, "url"), "url"),
            key=JsonWebKey.from_json(_required(mapping, "key")),
            iv=_string(_required(mapping, "iv"), "iv"),
            hashes={
                _string(name, "hashes"): _string(value, "hashes")
                for name, value in hashes.items()
            },
            v=_string(_required(mapping, "v"), "v"),
        )


@dataclass
class ThumbnailInfo:
    """Metadata about a thumbnail."""

    height: int | None = None
    width: int | None = None
    mimetype: str | None = None
    size: int | None = None

    def to_json(self) -> dict[str, Any]:
        return _drop_none(
            {
                "h": self.height,
                "w": self.width,
                "mimetype": self.mimetype,
                "size": self.size,
            }
        )

    @classmethod
    def from_json(cls, data: Any) -> "ThumbnailInfo":
        mapping = _object(data)
        return cls(
            height=_optional_uint(mapping, "h"),
            width=_optional_uint(mapping, "w"),
            mimetype=_optional_string(mapping, "mimetype"),
            size=_optional_uint(mapping, "size"),
        )


@dataclass
class ImageInfo:
    """Metadata about an image."""

    height: int | None = None
    width: int | None = None
    mimetype: str | None = None
    size: int | None = None
    thumbnail_info: ThumbnailInfo | None = None
    thumbnail_url: str | None = None
    thumbnail_file: EncryptedFile | None = None

    def to_json(self) -> dict[str, Any]:
        return _drop_none(
            {
                "h": self.height,
                "w": self.width,
                "mimetype": self.mimetype,
                "size": self.size,
                "thumbnail_info": (
                    None if self.thumbnail_info is None else self.thumbnail_info.to_json()
                ),
                "thumbnail_url": self.thumbnail_url,
                "thumbnail_file": (
                    None if self.thumbnail_file is None else self.thumbnail_file.to_json()
                ),
            }
        )

    @classmethod
    def from_json(cls, data: Any) -> "ImageInfo":
        mapping = _object(data)
        info = mapping.get("thumbnail_info")
        thumbnail_file = mapping.get("thumbnail_file")
        return cls(
            height=_optional_uint(mapping, "h"),
            width=_optional_uint(mapping, "w"),
            mimetype=_optional_string(mapping, "mimetype"),
            size=_optional_uint(mapping, "size"),
            thumbnail_info=None if info is None else ThumbnailInfo.from_json(info),
            thumbnail_url=_optional_string(mapping, "thumbnail_url"),
            thumbnail_file=(
                None if thumbnail_file is None else EncryptedFile.from_json(thumbnail_file)
            ),
        )