"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks interactively for whatever
the command line left out, unless non-interactive mode is requested.

Typical usage example:

    rsadigest keygen --keysize 1024 --key key.pem --public-key pub.pem --private-key priv.pem
    rsadigest encrypt --key priv.pem --input msg.bin --output msg.txt
    python -m rsadigest
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import typing

import rsadigest
from rsadigest import engine
from rsadigest import rsa


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


KEY_TYPES = {
    "full": rsa.RSAKey,
    "public": rsa.RSAPublicKey,
    "private": rsa.RSAPrivateKey,
}

help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Digest.",
            choices=["keygen", "encrypt", "decrypt", "dump"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "encrypt":
        HelpData("Byte-wise encryption utility."),
    "decrypt":
        HelpData("Byte-wise decryption utility."),
    "dump":
        HelpData("Key dump utility."),
    "key":
        HelpData(
            description="Location of the key file.",
            format=pathlib.Path,
        ),
    "public_key":
        HelpData(
            description="Location of the public projection file (modulus and d).",
            format=pathlib.Path,
        ),
    "private_key":
        HelpData(
            description="Location of the private projection file (modulus and e).",
            format=pathlib.Path,
        ),
    "keysize":
        HelpData(
            description="Key size (in bits).",
            choices=["64", "128", "256", "512", "1024", "2048", "3072", "4096"],
            default="1024",
        ),
    "enc_key_type":
        HelpData(
            description="Kind of key file used to encrypt.",
            choices=["private", "public"],
            advanced=True,
            default="private",
        ),
    "dec_key_type":
        HelpData(
            description="Kind of key file used to decrypt.",
            choices=["public", "private"],
            advanced=True,
            default="public",
        ),
    "dump_key_type":
        HelpData(
            description="Kind of key file to dump.",
            choices=["full", "public", "private"],
            default="full",
        ),
    "input":
        HelpData(
            description="Location of the input file.",
            format=pathlib.Path,
        ),
    "output":
        HelpData(
            description="Location of the output file.",
            format=pathlib.Path,
        ),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "keygen": ("key", "public_key", "private_key", "keysize"),
    "encrypt": ("key", "enc_key_type", "input", "output"),
    "decrypt": ("key", "dec_key_type", "input", "output"),
    "dump": ("key", "dump_key_type"),
}

keyfile = argparse.ArgumentParser(add_help=False)
keyfile.add_argument("--key", "-k", type=help_dict["key"].format, help=help_dict["key"].description)
streams = argparse.ArgumentParser(add_help=False)
streams.add_argument("--input", "-i", type=help_dict["input"].format, help=help_dict["input"].description)
streams.add_argument("--output", "-O", type=help_dict["output"].format, help=help_dict["output"].description)
corep = argparse.ArgumentParser(prog="rsadigest")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsadigest.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[keyfile], help=help_dict["keygen"].description)
keygen.add_argument("--public-key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
keygen.add_argument("--private-key",
                    "-P",
                    type=help_dict["private_key"].format,
                    help=help_dict["private_key"].description)
keygen.add_argument("--keysize", choices=help_dict["keysize"].choices, help=help_dict["keysize"].description)
keygen.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)

encrypt = commands.add_parser("encrypt", parents=[keyfile, streams], help=help_dict["encrypt"].description)
encrypt.add_argument("--key-type",
                     "-t",
                     dest="enc_key_type",
                     choices=help_dict["enc_key_type"].choices,
                     help=help_dict["enc_key_type"].description)
decrypt = commands.add_parser("decrypt", parents=[keyfile, streams], help=help_dict["decrypt"].description)
decrypt.add_argument("--key-type",
                     "-t",
                     dest="dec_key_type",
                     choices=help_dict["dec_key_type"].choices,
                     help=help_dict["dec_key_type"].description)
dump = commands.add_parser("dump", parents=[keyfile], help=help_dict["dump"].description)
dump.add_argument("--key-type",
                  "-t",
                  dest="dump_key_type",
                  choices=help_dict["dump_key_type"].choices,
                  help=help_dict["dump_key_type"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    for choice in helper_data.choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in helper_data.choices:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to RSA Digest!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    match args.subcommand:
        case "keygen":
            if any(pt.exists() for pt in (args.key, args.public_key, args.private_key)):
                rs = getattr(args, "overwrite", None)
                if rs is None:
                    rs = choice_handler("overwrite", pstatus, pspr)
                if rs == "N":
                    print("Destination key files already exist!")
                    return
            key = rsa.generate_key(int(args.keysize))
            key.export(args.key)
            key.public().export(args.public_key)
            key.private().export(args.private_key)
            pspr("\nKey generated!")
        case "encrypt":
            key = KEY_TYPES[args.enc_key_type].import_key(args.key)
            count = engine.encrypt_file(key, args.input, args.output)
            pspr(f"Encrypted {count} units.")
        case "decrypt":
            key = KEY_TYPES[args.dec_key_type].import_key(args.key)
            count = engine.decrypt_file(key, args.input, args.output)
            pspr(f"Decrypted {count} units.")
        case "dump":
            key = KEY_TYPES[args.dump_key_type].import_key(args.key)
            print(key.dump(), end="")
    pspr("Thank you for using RSA Digest!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
