"""Simplified IKNP-style OT extension.

Both parties derive the key for instance j and bit c from a matrix of
SECURITY_PARAMETER seeds:

    key(j, c) = H(t(s_1, c), j) || H(t(s_2, c), j) || ... || H(t(s_k, c), j)

where H is CorrelationRobustHash and t flips the low bit of a seed's first
byte when c = 1. In full IKNP the seeds come out of k base OTs; here that
step is behind BaseOTProvider and the default provider simply draws random
seeds, which the sender then ships alongside the ciphertexts. The receiver
can therefore derive both keys: this mirrors the educational design and is
not a secure extension.
"""

import logging
import os
from abc import ABC, abstractmethod

from . import keystream
from .base import OTSender, OTReceiver, check_choice, check_message
from .errors import ChoiceCountMismatch, NoMessagesSet
from .hashing import CorrelationRobustHash
from .messages import ExtensionParameters, ExtensionRequest, ExtensionResponse

logger = logging.getLogger(__name__)

SECURITY_PARAMETER = 128
SEED_LENGTH = 32


class BaseOTProvider(ABC):

    @abstractmethod
    def generate_seed_pairs(self, n):
        """Return a tuple of n seeds produced by n base OTs."""


class RandomSeedProvider(BaseOTProvider):
    def __init__(self, seed_length=SEED_LENGTH):
        self.seed_length = seed_length

    def generate_seed_pairs(self, n):
        return tuple(os.urandom(self.seed_length) for _ in range(n))


def seed_transform(seed, choice_bit):
    if choice_bit == 0 or not seed:
        return bytes(seed)
    return bytes([seed[0] ^ 1]) + bytes(seed[1:])


def derive_key(seeds, index, choice_bit):
    return b''.join(
        CorrelationRobustHash.hash(seed_transform(seed, choice_bit), index)
        for seed in seeds
    )


def _check_pair(pair):
    if len(pair) != 2:
        raise ValueError('Each message pair must hold exactly 2 messages, got %d'
                         % len(pair))
    return (check_message(pair[0]), check_message(pair[1]))


class Sender(OTSender):
    def __init__(self, seed_provider=None):
        self._messages = []
        self.seed_provider = seed_provider or RandomSeedProvider()

    @property
    def message_pairs(self):
        return list(self._messages)

    @message_pairs.setter
    def message_pairs(self, message_pairs):
        self._messages = [_check_pair(pair) for pair in message_pairs]

    def set_messages(self, message_pairs):
        self.message_pairs = message_pairs

    def generate_parameters(self):
        return ExtensionParameters(security_parameter=SECURITY_PARAMETER)

    def extend_ots(self):
        num_extensions = len(self._messages)
        if num_extensions == 0:
            raise NoMessagesSet()

        # Step 1: seeds standing in for the base OTs
        seeds = tuple(self.seed_provider.generate_seed_pairs(SECURITY_PARAMETER))
        if len(seeds) != SECURITY_PARAMETER:
            raise ValueError('Seed provider returned %d seeds, expected %d'
                             % (len(seeds), SECURITY_PARAMETER))

        # Step 2: encrypt both slots of every instance
        encrypted_messages = []
        for j, (msg0, msg1) in enumerate(self._messages):
            key0 = derive_key(seeds, j, 0)
            key1 = derive_key(seeds, j, 1)
            encrypted_messages.append((keystream.encrypt(msg0, key0),
                                       keystream.encrypt(msg1, key1)))

        logger.debug("Extended %d OTs from %d seeds", num_extensions, len(seeds))
        return ExtensionResponse(
            seeds=seeds,
            encrypted_messages=tuple(encrypted_messages),
        )

    def process(self, request):
        if request.num_instances != len(self._messages):
            raise ChoiceCountMismatch(request.num_instances, len(self._messages))
        return self.extend_ots()


class Receiver(OTReceiver):
    def __init__(self, choices):
        self._choices = tuple(check_choice(c) for c in choices)

    @property
    def choices(self):
        return list(self._choices)

    def respond(self, parameters):
        return ExtensionRequest(num_instances=len(self._choices))

    def receive_extended_ots(self, sender_response):
        seeds = sender_response.seeds
        encrypted_messages = sender_response.encrypted_messages
        if len(encrypted_messages) < len(self._choices):
            raise ChoiceCountMismatch(len(self._choices), len(encrypted_messages))

        results = []
        for j, choice in enumerate(self._choices):
            key = derive_key(seeds, j, choice)
            results.append(keystream.decrypt(encrypted_messages[j][choice], key))
        return results

    def decrypt(self, response):
        return self.receive_extended_ots(response)
