"""Server-side HTTP handlers for the emulated BigQuery API.

handler_gen.py is written by `python -m handlergen`; base.py holds the
handler contract the generated classes satisfy.
"""
