# Hash-derived XOR keystream shared by every OT family.
# Not authenticated: a key must never encrypt more than one message.

from .hashing import sha256


def _key_bytes(key_material):
    if isinstance(key_material, str):
        return key_material.encode('utf-8')
    return bytes(key_material)


def keystream(key_material, length):
    key_hash = sha256(_key_bytes(key_material))
    repeats = length // len(key_hash) + 1
    return (key_hash * repeats)[:length]


def encrypt(plaintext, key_material):
    if not isinstance(plaintext, (bytes, bytearray)):
        raise TypeError('Expected bytes plaintext but got: %s' % type(plaintext))
    stream = keystream(key_material, len(plaintext))
    return bytes(m ^ k for m, k in zip(plaintext, stream))


def decrypt(ciphertext, key_material):
    return encrypt(ciphertext, key_material)
