"""
Signdoc - Signing-side view of the packed nonce.

Rebuilds the account_number / sequence header a signer needs and the
canonical bytes it signs. Key handling and broadcast live elsewhere.
"""
