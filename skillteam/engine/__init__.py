"""Team composition and analysis engine.

Sub-modules:
- eligibility   – at-least-one-skill-match filter
- selection     – seeded random team sampling
- composition   – compose_team orchestration and persistence
- tag_resolver  – tag id → name lookup, tag search
- coverage      – required-skill coverage summary
- analysis      – LLM skill-gap analysis of a persisted team
"""
