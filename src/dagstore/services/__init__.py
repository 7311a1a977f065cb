"""Service layer — graph document operations returning ServiceResult.

Services may import from domain, codecs and config.
They must never import from commands or output.
"""
