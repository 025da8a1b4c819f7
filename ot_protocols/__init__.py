from . import ot_extension as _extension
from . import ec_ot as _ec
from . import rsa_ot as _rsa
from .errors import (ChoiceCountMismatch, InvalidChoice, InvalidInverse,
                     MessagesNotSet, NoMessagesSet, OTError, ProtocolStateError)
from .runner import extension, oblivious_transfer, run_protocol, simple_ot

__version__ = '0.1.0'


def sender():
    return _ec.Sender()


def receiver(choice):
    return _ec.Receiver(choice)


def simple_sender(**kwargs):
    return _rsa.Sender(**kwargs)


def simple_receiver(choice):
    return _rsa.Receiver(choice)


def extension_sender(**kwargs):
    return _extension.Sender(**kwargs)


def extension_receiver(choices):
    return _extension.Receiver(choices)


def set_extension_message_pairs(sender, message_pairs):
    sender.message_pairs = message_pairs
