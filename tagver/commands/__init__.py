"""Click commands behind the ``describe`` and ``version-check`` scripts."""
