"""Everything that touches the outside world.

Contents:
    * :mod:`.cli` - rich-click commands ``run``, ``lessons``, ``info``, ``config``
    * :mod:`.config` - layered configuration and ``[exercises]`` validation
    * :mod:`.console` - streaming exercise lines to stdout
    * :mod:`.logging` - lib_log_rich runtime
    * :mod:`.memory` - stand-ins for tests
"""

from __future__ import annotations
