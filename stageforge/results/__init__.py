from .log import LOG_DIR, ResultLog, dump_job, load_job

__all__ = ["LOG_DIR", "ResultLog", "dump_job", "load_job"]
