"""Configuration package for the population simulation.

Constant modules (``creatures``, ``food``, ``world``) hold the tuned numbers
for each rule variant. ``simulation_config`` bundles run-level settings into
dataclasses; import it directly, since it depends on ``evosim.rulesets``
which in turn reads the constant modules.
"""
