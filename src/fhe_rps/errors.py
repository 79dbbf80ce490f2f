"""
fhe_rps.errors — Custom exception classes
==========================================

Defines the exception hierarchy for game rule violations and
ciphertext handling failures. Each game rule error stores full
context (operation, caller, status) for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json


class FheRpsError(Exception):
    """Base exception for all fhe_rps package errors."""
    pass


# ══════════════════════════════════════════════════════════════
# GAME RULE VIOLATIONS
# ══════════════════════════════════════════════════════════════

class GameRuleError(FheRpsError):
    """
    A lifecycle precondition was violated.

    The call that raised it made no change to the game record.
    Subclasses map 1:1 to the corrective action the caller should take.
    """

    code = "GAME_RULE"
    hint = ""

    def __init__(
        self,
        operation: str,
        caller: Optional[str],
        status: str,
        detail: str = "",
    ):
        self.operation = operation
        self.caller = caller
        self.status = status
        self.detail = detail
        message = f"{operation}({caller}) rejected: {self.code} (status={status})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "operation": self.operation,
            "caller": self.caller,
            "status": self.status,
            "detail": self.detail,
        }

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.code,
            operation=self.operation,
            caller=self.caller,
            status=self.status,
            context=self.to_dict(),
            hint=self.hint,
        )


class AlreadyInProgressError(GameRuleError):
    """Raised when start() is called while a non-completed game exists."""
    code = "ALREADY_IN_PROGRESS"
    hint = "Wait for the current game to complete."


class NoGameError(GameRuleError):
    """Raised when join() or submit() is called before any game was started."""
    code = "NO_GAME"
    hint = "Start a game first."


class SelfJoinError(GameRuleError):
    """Raised when the first player tries to join their own game."""
    code = "SELF_JOIN"
    hint = "A second, different participant must join."


class SeatTakenError(GameRuleError):
    """Raised when join() finds the second seat already occupied."""
    code = "SEAT_TAKEN"
    hint = "Pick another game or wait for this one to complete."


class NotAPlayerError(GameRuleError):
    """Raised when submit() is called by someone holding no seat."""
    code = "NOT_A_PLAYER"
    hint = "Only the two seated players may submit."


class DuplicateSubmissionError(GameRuleError):
    """Raised when a seat that already committed submits again."""
    code = "DUPLICATE_SUBMISSION"
    hint = "Do not resubmit; the first commitment stands."


# ══════════════════════════════════════════════════════════════
# CIPHERTEXT ERRORS
# ══════════════════════════════════════════════════════════════

class CiphertextError(FheRpsError):
    """Base class for failures raised by a homomorphic backend."""

    def __init__(self, handle: str, message: str):
        self.handle = handle
        super().__init__(f"{message} (handle={handle})")


class InvalidInputProofError(CiphertextError):
    """Raised when an external ciphertext's proof does not bind it to its owner."""

    def __init__(self, handle: str, owner: str):
        self.owner = owner
        super().__init__(handle, f"Input proof rejected for owner '{owner}'")


class UnknownHandleError(CiphertextError):
    """Raised when a handle is not present in the backend's ciphertext table."""

    def __init__(self, handle: str):
        super().__init__(handle, "Unknown ciphertext handle")


class NotPubliclyDecryptableError(CiphertextError):
    """Raised when public decryption is requested for a non-declassified handle."""

    def __init__(self, handle: str):
        super().__init__(handle, "Handle is not marked publicly decryptable")


class AccessDeniedError(CiphertextError):
    """Raised when an account uses a ciphertext it holds no grant on."""

    def __init__(self, handle: str, account: str):
        self.account = account
        super().__init__(handle, f"Account '{account}' is not allowed on this ciphertext")


def _format_error_block(
    error_type: str,
    operation: str,
    caller: Optional[str],
    status: str,
    context: Dict[str, Any],
    hint: str,
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " GAME RULE VIOLATION — CALL REJECTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Operation:    {operation}",
        f" Caller:       {caller}",
        f" Status:       {status}",
    ]

    lines.append("")
    lines.append(" ── CONTEXT " + "─" * 52)
    lines.append(_indent_json(context))

    if hint:
        lines.append("")
        lines.append(" ── WHAT TO DO " + "─" * 49)
        lines.append(f" • {hint}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
