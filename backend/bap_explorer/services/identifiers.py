"""BAP Explorer — Identifier shape validation for detail lookups.

Each parser raises InvalidParameter before any lookup is attempted and returns
the identifier in canonical form.
"""
import re

from bap_explorer.core.errors import InvalidParameter

HEIGHT_RE = re.compile(r"^\d{1,18}$")
TX_HASH_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")
ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
NFX_ID_RE = re.compile(r"^nfx-(\d{1,9})$")
ASSET_ID_RE = re.compile(r"^[A-Za-z0-9_.:-]{1,128}$")


def parse_block_height(raw: str | int | None) -> int:
    text = str(raw).strip() if raw is not None else ""
    if not HEIGHT_RE.match(text) or int(text) < 1:
        raise InvalidParameter("Invalid block identifier", field="blockId")
    return int(text)


def parse_tx_hash(raw: str | None) -> str:
    if not raw or not TX_HASH_RE.match(raw):
        raise InvalidParameter("Invalid transaction hash", field="txHash")
    return raw.lower()


def parse_address(raw: str | None, field: str = "address") -> str:
    if not raw or not ADDRESS_RE.match(raw):
        raise InvalidParameter("Invalid address", field=field)
    return raw.lower()


def parse_nfx_id(raw: str | None) -> int:
    """`nfx-<n>` with n >= 1; returns n."""
    match = NFX_ID_RE.match(raw or "")
    if not match or int(match.group(1)) < 1:
        raise InvalidParameter("Invalid NFX ID", field="id")
    return int(match.group(1))


def parse_asset_id(raw: str | None) -> str:
    if not raw or not ASSET_ID_RE.match(raw):
        raise InvalidParameter("Invalid asset identifier", field="assetId")
    return raw
