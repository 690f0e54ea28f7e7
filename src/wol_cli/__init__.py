"""Wake-on-LAN command line sender

Sends magic packets by UDP broadcast to the networks given on the command line
or, by default, to every local IPv4 network.
"""

__version__ = "1.0.0"
