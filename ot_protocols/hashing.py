from cryptography.hazmat.primitives import hashes

DIGEST_SIZE = 32
INDEX_BYTES = 8
MAX_INDEX = 2 ** (8 * INDEX_BYTES) - 1


def sha256(data):
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


class CorrelationRobustHash:
    """SHA-256 keyed by a seed and a non-negative instance index.

    The index is appended to the seed as 8 big-endian bytes, so both
    parties hash byte-identical input for the same (seed, index).
    """

    @staticmethod
    def hash(seed, index):
        if not 0 <= index <= MAX_INDEX:
            raise ValueError("index must be in [0, 2**64), got %d" % index)
        return sha256(bytes(seed) + index.to_bytes(INDEX_BYTES, 'big'))

    @classmethod
    def hash_with_length(cls, seed, index, length):
        if length < 0:
            raise ValueError("length must be non-negative, got %d" % length)
        output = b''
        counter = 0
        while len(output) < length:
            output += cls.hash(seed, index + counter)
            counter += 1
        return output[:length]
