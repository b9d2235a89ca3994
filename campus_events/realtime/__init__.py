"""Realtime infrastructure (Socket.IO).

One process-wide socket server carries every catalog and registration
broadcast; clients treat each message as a cue to refetch.
"""
