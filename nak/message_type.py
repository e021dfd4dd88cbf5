class ClientMessageType:
    REQUEST = "REQ"
