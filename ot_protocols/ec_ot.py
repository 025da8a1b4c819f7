import logging

from . import keystream
from .base import OTSender, OTReceiver, check_choice, check_message
from .curve25519 import GENERATOR, Point, Scalar
from .errors import MessagesNotSet, ProtocolStateError
from .messages import ECChoice, ECParameters, ECResponse, b64decode, b64encode

logger = logging.getLogger(__name__)


class Sender(OTSender):
    def __init__(self):
        self._messages = None
        self._private_key = Scalar.random()
        self._public_key = GENERATOR * self._private_key

    def set_messages(self, message0, message1):
        self._messages = (check_message(message0), check_message(message1))

    def generate_parameters(self):
        return ECParameters(
            public_key=self._public_key.to_base64(),
            generator=GENERATOR.to_base64(),
        )

    def process_choice(self, receiver_public_key):
        if self._messages is None:
            raise MessagesNotSet()

        B = Point.from_base64(receiver_public_key)
        r0 = Scalar.random()
        r1 = Scalar.random()

        # B = g*k for choice 0 and g*k + A for choice 1, so only the slot
        # matching the receiver's choice yields g*k*r_i
        shared0 = B * r0
        shared1 = (B - self._public_key) * r1

        c0 = keystream.encrypt(self._messages[0], shared0.to_bytes())
        c1 = keystream.encrypt(self._messages[1], shared1.to_bytes())
        logger.debug("Encrypted both EC OT slots")

        return ECResponse(
            encrypted_messages=(b64encode(c0), b64encode(c1)),
            r_points=((GENERATOR * r0).to_base64(),
                      (GENERATOR * r1).to_base64()),
        )

    def process(self, request):
        return self.process_choice(request.public_key)


class Receiver(OTReceiver):
    def __init__(self, choice):
        self.choice = check_choice(choice)
        self._private_key = Scalar.random()
        self.public_key = None

    def generate_public_key(self, sender_params):
        A = Point.from_base64(sender_params.public_key)
        generator = Point.from_base64(sender_params.generator)

        base_key = generator * self._private_key
        if self.choice == 0:
            self.public_key = base_key
        else:
            self.public_key = base_key + A

        return ECChoice(public_key=self.public_key.to_base64())

    def respond(self, parameters):
        return self.generate_public_key(parameters)

    def decrypt_message(self, sender_response):
        if self.public_key is None:
            raise ProtocolStateError(
                "generate_public_key must run before decrypt_message")

        R = Point.from_base64(sender_response.r_points[self.choice])
        shared_secret = R * self._private_key

        encrypted = b64decode(sender_response.encrypted_messages[self.choice])
        return keystream.decrypt(encrypted, shared_secret.to_bytes())

    def decrypt(self, response):
        return self.decrypt_message(response)
