"""Transaction envelope interface.

Building, signing and XDR-encoding transactions happens elsewhere. The
submitter only needs the envelope in its transport encoding.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TransactionEnvelope(Protocol):
    """A signed transaction that can serialise itself for submission."""

    def to_envelope_xdr_base64(self) -> str:
        """Return the base64-encoded XDR transaction envelope."""
        ...
