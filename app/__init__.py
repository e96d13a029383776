"""Equipment rental reservation service.

Keeping this file makes ``app`` a regular package so it is never resolved as a
namespace package from unrelated site-packages entries.
"""
