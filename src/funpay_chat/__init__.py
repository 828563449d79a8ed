"""
funpay-chat — FunPay chat auto-responder.

Scrapes the FunPay web chat for new messages and answers exact-match
commands with canned replies.
"""

from funpay_chat.client import AsyncFunPay
from funpay_chat.config import BotConfig, load_config, save_config
from funpay_chat.dispatcher import CommandDispatcher
from funpay_chat.errors import FunPayError, AuthError, NetworkError, FetchError, NotAuthenticated, ConfigError
from funpay_chat.models.message import Message, PollResult, ScannedMessage
from funpay_chat.tracker import MessageTracker

__version__ = "0.1.0"
__all__ = [
    "AsyncFunPay",
    "BotConfig",
    "load_config",
    "save_config",
    "CommandDispatcher",
    "MessageTracker",
    "FunPayError",
    "AuthError",
    "NetworkError",
    "FetchError",
    "NotAuthenticated",
    "ConfigError",
    "Message",
    "PollResult",
    "ScannedMessage",
]
