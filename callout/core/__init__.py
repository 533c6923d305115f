"""Parser core: tokenizer, normalizers, grammar rules and command model."""
