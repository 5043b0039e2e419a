"""Contains the name for the logger of RegKit modules.

``regkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Details of the decomposition (sweep counts, truncation cutoffs).
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a rank-deficient fit.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``regkit.logger.regkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "regkit"
regkit_logger = logging.getLogger(logger_name)
