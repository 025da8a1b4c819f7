# In-process protocol messages. Field encodings mirror what each party would
# put on the wire: hex for big integers, base64 for ciphertexts and points.

import base64
from dataclasses import dataclass, asdict
from typing import Tuple


def int_to_hex(value):
    return format(value, 'x')


def hex_to_int(hex_string):
    return int(hex_string, 16)


def b64encode(data):
    return base64.b64encode(data).decode('ascii')


def b64decode(data):
    return base64.b64decode(data, validate=True)


@dataclass(frozen=True)
class RSAParameters:
    public_key: bytes  # PEM SubjectPublicKeyInfo

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class BlindedValues:
    x0: str
    x1: str

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class RSAResponse:
    encrypted_messages: Tuple[str, str]
    y_values: Tuple[str, str]

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ECParameters:
    public_key: str
    generator: str

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ECChoice:
    public_key: str

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ECResponse:
    encrypted_messages: Tuple[str, str]
    r_points: Tuple[str, str]

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ExtensionParameters:
    security_parameter: int

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ExtensionRequest:
    num_instances: int

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ExtensionResponse:
    seeds: Tuple[bytes, ...]
    encrypted_messages: Tuple[Tuple[bytes, bytes], ...]

    def as_dict(self):
        return asdict(self)
