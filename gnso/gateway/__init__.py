"""RPC gateway: token check, path building and response shaping."""
