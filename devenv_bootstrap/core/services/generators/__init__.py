"""
Generators — produce Docker config text from project facts.

Each generator module exposes a pure ``generate_*()`` function that
returns the file content as a string.  Wrapping into ``GeneratedFile``
and writing to disk happens in ``services.docker_generate``.
"""
