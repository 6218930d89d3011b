"""
Core package: symbols, groups, rules, validation and the generator facade.
"""
