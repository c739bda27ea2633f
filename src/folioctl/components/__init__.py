"""Page components: thin scheduler-driven drivers over the domain rules.

Components receive their scheduler, display slots, and stores at
construction time. None of them reads module-level state.
"""
