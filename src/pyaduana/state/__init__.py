"""State layer.

Holds the filter form, the current vehicle snapshot, the exchange rate
and the row selection.  Only the controller mutates fetched data.
"""
