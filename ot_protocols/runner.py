from . import ot_extension as _extension
from . import ec_ot as _ec
from . import rsa_ot as _rsa
from .errors import ChoiceCountMismatch


def run_protocol(sender, receiver):
    # Step 1
    parameters = sender.generate_parameters()

    # Step 2
    request = receiver.respond(parameters)

    # Step 3
    response = sender.process(request)

    # Step 4
    return receiver.decrypt(response)


def simple_ot(message0, message1, choice):
    receiver = _rsa.Receiver(choice)
    sender = _rsa.Sender()
    sender.set_messages(message0, message1)
    return run_protocol(sender, receiver)


def oblivious_transfer(message0, message1, choice):
    receiver = _ec.Receiver(choice)
    sender = _ec.Sender()
    sender.set_messages(message0, message1)
    return run_protocol(sender, receiver)


def extension(message_pairs, choices, seed_provider=None):
    if len(choices) != len(message_pairs):
        raise ChoiceCountMismatch(len(choices), len(message_pairs))

    receiver = _extension.Receiver(choices)
    sender = _extension.Sender(seed_provider=seed_provider)
    sender.set_messages(message_pairs)
    return run_protocol(sender, receiver)
