"""
Per-language inflection rules, grouped by language family.

Each module exposes one rule object per language that defines its own
logic (an ``Inflection`` or a ``SuffixTable``). Languages that reuse
another language's logic are bound in ``i18n_inflector.registry``.
"""
