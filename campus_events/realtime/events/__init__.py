"""Payload builders and emitters for catalog and registration changes.

Called from model signal handlers after commit; the socket server itself
lives in ``campus_events.realtime.socketio``.
"""
