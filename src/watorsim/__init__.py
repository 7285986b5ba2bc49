"""
watorsim: Wa-Tor predator-prey simulator

Fish and sharks live on a toroidal grid and evolve in discrete time
steps (chronons):
- Fish wander into empty water and breed after a fixed number of chronons
- Sharks hunt adjacent fish, starve without food and breed the same way
- A step reads only the previous grid and writes a brand-new one
- Steps can run sequentially or partitioned by rows across workers
"""

__version__ = "0.1.0"
