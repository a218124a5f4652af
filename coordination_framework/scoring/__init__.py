"""
scoring/ — ATCF and coordination scoring

Modules:
    utils.py                    - Set-similarity and statistics helpers
    tables.py                   - Static lookup tables (cultural modifiers, compatibility matrices)
    cultural_adapter.py         - Cultural weight adaptation
    coherence_calculator.py     - ATCF (Adaptive Temporal Coherence Function) scorer
    prf_compatibility.py        - Belief / rule / ontology / authenticity compatibility
    coordination_calculator.py  - Cross-agent coordination assessment
    demo_calculator.py          - Slider-mode calculators for the interactive demos
"""
