"""
Core value model, arithmetic engine, and invariants.

This module contains the foundational building blocks: the digit-level
arithmetic engine (math), the validated value model (domain), serialized
contracts (contracts) and the error hierarchy (errors).
"""
