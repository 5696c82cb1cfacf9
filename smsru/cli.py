# Copyright 2026 The smsru Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""The ``smsru`` command: call SMS.RU methods from a shell."""

import argparse
import logging
import logging.handlers
import sys
from typing import Any, Awaitable, Callable, List, Optional

from twisted.internet import defer, task
from twisted.python import log

from smsru.client import SmsRuClient
from smsru.config import ConfigError, SmsRuConfig, get_config_file_path
from smsru.domain.requests import (
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCostOptions,
    CheckCostPerRecipient,
    CheckCostToMany,
    CheckStatus,
    RemoveCallback,
    RemoveStoplistEntry,
    SendOptions,
    SendSmsPerRecipient,
    SendSmsToMany,
    StartCallAuth,
)
from smsru.domain.values import (
    CallbackUrl,
    CallCheckId,
    EndUserIp,
    MessageText,
    PartnerId,
    RawPhoneNumber,
    SenderId,
    SmsId,
    StoplistText,
    TtlMinutes,
    UnixTimestamp,
)
from smsru.errors import SmsRuError, ValidationError

Call = Callable[[SmsRuClient], Awaitable[Any]]


def setup_logging(config: SmsRuConfig) -> None:
    """
    Setup logging using the options specified in the config

    :param config: the configuration to use
    """
    log_path = config.general.log_path
    log_level = config.general.log_level

    log_format = "%(asctime)s - %(name)s - %(lineno)d - %(levelname)s" " - %(message)s"
    formatter = logging.Formatter(log_format)

    handler: logging.Handler
    if log_path != "":
        handler = logging.handlers.TimedRotatingFileHandler(
            log_path, when="midnight", backupCount=365
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)
    rootLogger = logging.getLogger("")
    rootLogger.setLevel(log_level)
    rootLogger.addHandler(handler)

    observer = log.PythonLoggingObserver()
    observer.start()


def _phones(values: List[str]) -> List[RawPhoneNumber]:
    # Accept "a,b" as well as "a b".
    return [RawPhoneNumber(p) for v in values for p in v.split(",") if p.strip()]


def _optional(factory: Callable[[Any], Any], value: Any) -> Any:
    return None if value is None else factory(value)


def _build_send(args: argparse.Namespace) -> Call:
    options = SendOptions(
        sender=_optional(SenderId, args.sender),
        ip=_optional(EndUserIp, args.ip),
        time=_optional(UnixTimestamp, args.time),
        ttl=_optional(TtlMinutes, args.ttl),
        daytime=args.daytime,
        translit=args.translit,
        test=args.test,
        partner_id=_optional(PartnerId, args.partner_id),
    )
    request: Any
    if args.per_recipient:
        request = SendSmsPerRecipient(
            {RawPhoneNumber(p): MessageText(t) for p, t in args.per_recipient},
            options,
        )
    else:
        request = SendSmsToMany(_phones(args.to), MessageText(args.msg), options)
    return lambda client: client.send_sms(request)


def _build_cost(args: argparse.Namespace) -> Call:
    options = CheckCostOptions(
        sender=_optional(SenderId, args.sender), translit=args.translit
    )
    request: Any
    if args.per_recipient:
        request = CheckCostPerRecipient(
            {RawPhoneNumber(p): MessageText(t) for p, t in args.per_recipient},
            options,
        )
    else:
        request = CheckCostToMany(_phones(args.to), MessageText(args.msg), options)
    return lambda client: client.check_cost(request)


def _build_status(args: argparse.Namespace) -> Call:
    request = CheckStatus([SmsId(i) for i in args.sms_ids])
    return lambda client: client.check_status(request)


def _build_call_auth(args: argparse.Namespace) -> Call:
    request = StartCallAuth(RawPhoneNumber(args.phone))
    return lambda client: client.start_call_auth(request)


def _build_call_auth_status(args: argparse.Namespace) -> Call:
    request = CheckCallAuthStatus(CallCheckId(args.check_id))
    return lambda client: client.check_call_auth_status(request)


def _build_stoplist_add(args: argparse.Namespace) -> Call:
    request = AddStoplistEntry(RawPhoneNumber(args.phone), StoplistText(args.text))
    return lambda client: client.add_stoplist_entry(request)


def _build_stoplist_del(args: argparse.Namespace) -> Call:
    request = RemoveStoplistEntry(RawPhoneNumber(args.phone))
    return lambda client: client.remove_stoplist_entry(request)


def _build_callback_add(args: argparse.Namespace) -> Call:
    request = AddCallback(CallbackUrl(args.url))
    return lambda client: client.add_callback(request)


def _build_callback_del(args: argparse.Namespace) -> Call:
    request = RemoveCallback(CallbackUrl(args.url))
    return lambda client: client.remove_callback(request)


def _no_arguments(method: str) -> Callable[[argparse.Namespace], Call]:
    def _build(args: argparse.Namespace) -> Call:
        return lambda client: getattr(client, method)()

    return _build


def _add_recipient_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--to", nargs="+", default=[], help="recipient phone numbers")
    parser.add_argument("--msg", help="message text, sent to every --to recipient")
    parser.add_argument(
        "--per-recipient",
        nargs=2,
        action="append",
        metavar=("PHONE", "TEXT"),
        help="a recipient with its own message; may be repeated",
    )
    parser.add_argument("--from", dest="sender", help="sender name")
    parser.add_argument("--translit", action="store_true")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smsru", description="SMS.RU API client")
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="path to the configuration file (default: $SMSRU_CONF or smsru.conf)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    send = subparsers.add_parser("send", help="send messages")
    _add_recipient_arguments(send)
    send.add_argument("--ip", help="IP address of the end user")
    send.add_argument("--time", type=int, help="send at this unix timestamp")
    send.add_argument("--ttl", type=int, help="delivery lifetime in minutes")
    send.add_argument("--daytime", action="store_true")
    send.add_argument("--test", action="store_true", help="don't actually send")
    send.add_argument("--partner-id")
    send.set_defaults(build=_build_send)

    cost = subparsers.add_parser("cost", help="check what sending would cost")
    _add_recipient_arguments(cost)
    cost.set_defaults(build=_build_cost)

    status = subparsers.add_parser("status", help="check delivery status")
    status.add_argument("sms_ids", nargs="+")
    status.set_defaults(build=_build_status)

    call_auth = subparsers.add_parser("call-auth", help="start a call authentication")
    call_auth.add_argument("phone")
    call_auth.set_defaults(build=_build_call_auth)

    call_auth_status = subparsers.add_parser(
        "call-auth-status", help="check a call authentication"
    )
    call_auth_status.add_argument("check_id")
    call_auth_status.set_defaults(build=_build_call_auth_status)

    for name, method, help_text in (
        ("auth-check", "check_auth", "check the configured credentials"),
        ("balance", "get_balance", "show the account balance"),
        ("free", "get_free_usage", "show free message usage"),
        ("limit", "get_limit_usage", "show daily limit usage"),
        ("senders", "get_senders", "list enabled sender names"),
        ("stoplist-get", "get_stoplist", "show the stoplist"),
        ("callback-get", "get_callbacks", "list callback URLs"),
    ):
        subparsers.add_parser(name, help=help_text).set_defaults(
            build=_no_arguments(method)
        )

    stoplist_add = subparsers.add_parser("stoplist-add", help="add to the stoplist")
    stoplist_add.add_argument("phone")
    stoplist_add.add_argument("text")
    stoplist_add.set_defaults(build=_build_stoplist_add)

    stoplist_del = subparsers.add_parser("stoplist-del", help="remove from the stoplist")
    stoplist_del.add_argument("phone")
    stoplist_del.set_defaults(build=_build_stoplist_del)

    callback_add = subparsers.add_parser("callback-add", help="add a callback URL")
    callback_add.add_argument("url")
    callback_add.set_defaults(build=_build_callback_add)

    callback_del = subparsers.add_parser("callback-del", help="remove a callback URL")
    callback_del.add_argument("url")
    callback_del.set_defaults(build=_build_callback_del)

    return parser


async def _run(reactor: Any, config: SmsRuConfig, call: Call) -> None:
    client = SmsRuClient.from_config(config, reactor)
    try:
        response = await call(client)
    except SmsRuError as e:
        print("Error: %s" % (e,), file=sys.stderr)
        raise SystemExit(1)
    print(response)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in ("send", "cost") and not args.per_recipient:
        if not args.to or args.msg is None:
            parser.error("%s needs --to and --msg, or --per-recipient" % (args.command,))

    try:
        call = args.build(args)
    except ValidationError as e:
        parser.error(str(e))

    config = SmsRuConfig()
    try:
        config.parse_config_file(args.config or get_config_file_path())
    except ConfigError as e:
        print("Invalid configuration: %s" % (e,), file=sys.stderr)
        sys.exit(2)

    setup_logging(config)

    task.react(lambda reactor: defer.ensureDeferred(_run(reactor, config, call)))


if __name__ == "__main__":
    main()
