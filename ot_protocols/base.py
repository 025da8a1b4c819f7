from abc import ABC, abstractmethod

from .errors import InvalidChoice


def check_choice(choice):
    if (not isinstance(choice, int) or isinstance(choice, bool)
            or choice not in (0, 1)):
        raise InvalidChoice(choice)
    return choice


def check_message(message):
    if not isinstance(message, (bytes, bytearray)):
        raise TypeError('Expected bytes message but got: %s' % type(message))
    return bytes(message)


class OTSender(ABC):
    """Sender side shared by every OT family.

    A run is: generate_parameters() -> receiver request -> process(request).
    Instances hold per-run secrets and must not be reused.
    """

    @abstractmethod
    def set_messages(self, *messages):
        pass

    @abstractmethod
    def generate_parameters(self):
        pass

    @abstractmethod
    def process(self, request):
        pass


class OTReceiver(ABC):

    @abstractmethod
    def respond(self, parameters):
        pass

    @abstractmethod
    def decrypt(self, response):
        pass
