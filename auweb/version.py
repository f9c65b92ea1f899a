VERSION = "0.4.0"
AUWEB = "auweb " + VERSION
