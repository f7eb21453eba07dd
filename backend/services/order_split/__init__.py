"""
Decide whether a ShipStation order mixes fulfillment sources and split it
into one order per source.
"""
