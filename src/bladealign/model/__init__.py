"""
The MODEL layer contains the geometry engine and the blade data model.
Everything here is pure: functions take values and return new values,
nothing is mutated in place and there is no module-level state.
"""
