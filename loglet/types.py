from typing import Any, Callable, Dict

LogRecord = Dict[str, Any]
LogHandler = Callable[[LogRecord], Any]
