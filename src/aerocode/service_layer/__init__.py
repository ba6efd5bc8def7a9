"""Service layer for AEROCODE.

Commands, their handlers, access control and the message bus that ties them
together. Entry points talk to this layer through the message bus built in
`aerocode.bootstrap`.
"""
