"""Infrastructure around the pure domain.

* :mod:`.config` reads files from disk and prints configurations.
* :mod:`.logging` starts the lib_log_rich runtime.
* :mod:`.memory` holds fakes used by the test suite.
* :mod:`.cli` is the ``linux-wave`` command.
"""
