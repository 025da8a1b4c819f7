"""RSA-blinding 1-out-of-2 oblivious transfer.

The receiver blinds a random r_b as x_b = r_b^e mod n and sends a random
decoy in the other slot. The sender answers y_i = k_i + x_i^d mod n for both
slots, so only y_b unblinds to a session key the receiver knows:
x_b^d = r_b, hence k_b = y_b - r_b mod n.

Educational only: session keys feed an unauthenticated XOR keystream.
"""

import logging
import os

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from . import keystream
from .base import OTSender, OTReceiver, check_choice, check_message
from .errors import MessagesNotSet, ProtocolStateError
from .messages import (BlindedValues, RSAParameters, RSAResponse,
                       b64decode, b64encode, hex_to_int, int_to_hex)

logger = logging.getLogger(__name__)

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
BLINDING_BITS = 256


def random_bits(bits):
    nbytes = (bits + 7) // 8
    value = int.from_bytes(os.urandom(nbytes), 'big')
    return value >> (nbytes * 8 - bits)


def _random_blinding():
    # r = 0 would blind to x = 0 and give the choice away
    r = 0
    while r == 0:
        r = random_bits(BLINDING_BITS)
    return r


def random_below(n):
    # uniform in [1, n)
    bits = n.bit_length()
    value = 0
    while not 0 < value < n:
        value = random_bits(bits)
    return value


def recover_session_key(y, r, n):
    return (y - r) % n


class Sender(OTSender):
    def __init__(self, key_size=RSA_KEY_SIZE, private_key=None):
        self._messages = None
        if private_key is None:
            private_key = rsa.generate_private_key(
                public_exponent=RSA_PUBLIC_EXPONENT,
                key_size=key_size
            )
            logger.debug("Generated %d-bit RSA key for OT sender", key_size)
        elif not isinstance(private_key, rsa.RSAPrivateKey):
            raise TypeError('Expected an RSA private key but got: %s'
                            % type(private_key).__name__)
        self._private_key = private_key
        self._public_key = private_key.public_key()

    def set_messages(self, message0, message1):
        self._messages = (check_message(message0), check_message(message1))

    def public_key(self):
        return self._public_key.public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def generate_parameters(self):
        return RSAParameters(public_key=self.public_key())

    def encrypt_messages(self, receiver_x0, receiver_x1):
        if self._messages is None:
            raise MessagesNotSet()

        private_numbers = self._private_key.private_numbers()
        d = private_numbers.d
        n = private_numbers.public_numbers.n

        encrypted = []
        y_values = []
        for message, x_hex in zip(self._messages, (receiver_x0, receiver_x1)):
            x = hex_to_int(x_hex)
            k = random_bits(BLINDING_BITS)
            y = (k + pow(x, d, n)) % n
            encrypted.append(b64encode(keystream.encrypt(message, int_to_hex(k))))
            y_values.append(int_to_hex(y))

        return RSAResponse(
            encrypted_messages=tuple(encrypted),
            y_values=tuple(y_values),
        )

    def process(self, request):
        return self.encrypt_messages(request.x0, request.x1)


class Receiver(OTReceiver):
    def __init__(self, choice):
        self.choice = check_choice(choice)
        self._r_values = None
        self._n = None

    def generate_blinding_values(self, sender_public_key_pem):
        if isinstance(sender_public_key_pem, str):
            sender_public_key_pem = sender_public_key_pem.encode('ascii')
        public_key = serialization.load_pem_public_key(sender_public_key_pem)
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise TypeError('Expected an RSA public key but got: %s'
                            % type(public_key).__name__)
        numbers = public_key.public_numbers()
        n, e = numbers.n, numbers.e

        self._n = n
        self._r_values = (_random_blinding(), _random_blinding())

        x = [0, 0]
        x[self.choice] = pow(self._r_values[self.choice], e, n)
        # The decoy must lie in [1, n) like x_b, and nobody knows its e-th root
        x[1 - self.choice] = random_below(n)

        return BlindedValues(x0=int_to_hex(x[0]), x1=int_to_hex(x[1]))

    def respond(self, parameters):
        return self.generate_blinding_values(parameters.public_key)

    def decrypt_message(self, sender_response):
        if self._r_values is None:
            raise ProtocolStateError(
                "generate_blinding_values must run before decrypt_message")

        y = hex_to_int(sender_response.y_values[self.choice])
        r = self._r_values[self.choice]
        k = recover_session_key(y, r, self._n)

        encrypted = b64decode(sender_response.encrypted_messages[self.choice])
        return keystream.decrypt(encrypted, int_to_hex(k))

    def decrypt(self, response):
        return self.decrypt_message(response)
