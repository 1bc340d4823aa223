"""Command-line front end and development helpers.

This package contains the Matplotlib plotter behind the ``audiospec``
command and the :mod:`debug` timing hooks enabled by ``AUDIOSPEC_DEBUG``.
"""
