import logging
import sys

from . import extension, oblivious_transfer, simple_ot
from .errors import OTError

USAGE = """Usage: python -m ot_protocols.main [--verbose] [rsa|ec] MESSAGE0 MESSAGE1 CHOICE
       python -m ot_protocols.main [--verbose] extension CHOICES M0 M1 [M0 M1 ...]"""


def run_base(protocol, args):
    if len(args) != 3 or args[2] not in ('0', '1'):
        return None
    message0, message1, choice = args
    return [protocol(message0.encode(), message1.encode(), int(choice))]


def run_extension(args):
    if len(args) < 3 or (len(args) - 1) % 2 != 0:
        return None
    choices = [int(c) for c in args[0] if c in '01']
    if len(choices) != len(args[0]):
        return None
    words = [w.encode() for w in args[1:]]
    message_pairs = [words[i:i + 2] for i in range(0, len(words), 2)]
    return extension(message_pairs, choices)


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ('-v', '--verbose'):
        logging.basicConfig(level=logging.DEBUG)
        args = args[1:]

    if not args or args[0] not in ('rsa', 'ec', 'extension'):
        print(USAGE)
        return 1

    command, rest = args[0], args[1:]
    try:
        if command == 'rsa':
            results = run_base(simple_ot, rest)
        elif command == 'ec':
            results = run_base(oblivious_transfer, rest)
        else:
            results = run_extension(rest)
    except OTError as e:
        print(f"Error: {e}")
        return 1

    if results is None:
        print(USAGE)
        return 1

    for result in results:
        print(f"Received: {result.decode('utf-8', errors='replace')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
