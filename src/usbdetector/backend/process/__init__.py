from .protocol import CommandExecutionError, CommandExecutorProtocol, OutputProcessorProtocol
from .service import SubprocessCommandExecutor, SubprocessOutputProcessor

__all__ = [
    "CommandExecutionError",
    "CommandExecutorProtocol",
    "OutputProcessorProtocol",
    "SubprocessCommandExecutor",
    "SubprocessOutputProcessor",
]
