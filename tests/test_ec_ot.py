import os

import pytest

from ot_protocols import keystream
from ot_protocols.curve25519 import GENERATOR, Point, Scalar
from ot_protocols.ec_ot import Receiver, Sender
from ot_protocols.errors import InvalidChoice, MessagesNotSet, ProtocolStateError
from ot_protocols.messages import ECChoice, ECParameters, ECResponse, b64decode
from ot_protocols.runner import oblivious_transfer, run_protocol

MESSAGES = (b"Secret message 0", b"Secret message 1")


class TestObliviousTransfer:

    @pytest.mark.parametrize("choice", [0, 1])
    def test_receives_chosen_message(self, choice):
        assert oblivious_transfer(*MESSAGES, choice) == MESSAGES[choice]

    @pytest.mark.parametrize("choice", [0, 1])
    def test_different_message_lengths(self, choice):
        messages = (b"short", os.urandom(4096))
        sender = Sender()
        sender.set_messages(*messages)
        assert run_protocol(sender, Receiver(choice)) == messages[choice]

    def test_step_by_step(self):
        sender = Sender()
        receiver = Receiver(1)
        sender.set_messages(*MESSAGES)

        params = sender.generate_parameters()
        choice = receiver.generate_public_key(params)
        response = sender.process_choice(choice.public_key)

        assert receiver.decrypt_message(response) == MESSAGES[1]

    @pytest.mark.parametrize("choice", [0, 1])
    def test_other_slot_stays_hidden(self, choice):
        sender = Sender()
        receiver = Receiver(choice)
        sender.set_messages(*MESSAGES)
        response = sender.process(receiver.respond(sender.generate_parameters()))

        other = 1 - choice
        r_point = Point.from_base64(response.r_points[other])
        guess = r_point * receiver._private_key
        ciphertext = b64decode(response.encrypted_messages[other])
        assert keystream.decrypt(ciphertext, guess.to_bytes()) != MESSAGES[other]


class TestSender:

    def test_generate_parameters(self):
        params = Sender().generate_parameters()
        assert isinstance(params, ECParameters)
        assert Point.from_base64(params.generator) == GENERATOR
        assert set(params.as_dict()) == {"public_key", "generator"}

    def test_process_choice_without_messages(self):
        with pytest.raises(MessagesNotSet):
            Sender().process_choice(GENERATOR.to_base64())

    def test_response_shape(self):
        sender = Sender()
        sender.set_messages(*MESSAGES)
        response = sender.process_choice(GENERATOR.to_base64())
        assert isinstance(response, ECResponse)
        assert len(response.encrypted_messages) == 2
        assert all(isinstance(Point.from_base64(p), Point) for p in response.r_points)

    def test_rejects_text_messages(self):
        with pytest.raises(TypeError):
            Sender().set_messages("msg0", "msg1")


class TestReceiver:

    @pytest.mark.parametrize("choice", [2, -1, True, 1.0, 0.0])
    def test_rejects_invalid_choice(self, choice):
        with pytest.raises(InvalidChoice):
            Receiver(choice)

    def test_generate_public_key(self):
        params = ECParameters(public_key=GENERATOR.to_base64(),
                              generator=GENERATOR.to_base64())
        message = Receiver(0).generate_public_key(params)
        assert isinstance(message, ECChoice)
        assert len(message.public_key) > 0

    def test_choice_masks_public_key(self):
        sender_key = GENERATOR * Scalar(7)
        params = ECParameters(public_key=sender_key.to_base64(),
                              generator=GENERATOR.to_base64())
        receiver0 = Receiver(0)
        receiver1 = Receiver(1)
        b0 = Point.from_base64(receiver0.generate_public_key(params).public_key)
        b1 = Point.from_base64(receiver1.generate_public_key(params).public_key)
        assert b0 == GENERATOR * receiver0._private_key
        assert b1 == GENERATOR * receiver1._private_key + sender_key

    def test_decrypt_before_public_key(self):
        response = ECResponse(encrypted_messages=("", ""),
                              r_points=(GENERATOR.to_base64(), GENERATOR.to_base64()))
        with pytest.raises(ProtocolStateError):
            Receiver(0).decrypt_message(response)
