from .live_connection_gateway import LiveConnection, LiveConnectionGateway, LiveConnectionState

__all__ = [
    "LiveConnection",
    "LiveConnectionGateway",
    "LiveConnectionState",
]
