"""
bindgen - generates QtScript bindings for C++ classes described by Doxygen XML
"""

__version__ = '1.0.0'
