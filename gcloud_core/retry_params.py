from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_RETRY_MIN_ATTEMPTS = 3
DEFAULT_RETRY_MAX_ATTEMPTS = 6
DEFAULT_INITIAL_RETRY_DELAY_MILLIS = 1000
DEFAULT_MAX_RETRY_DELAY_MILLIS = 32000
DEFAULT_RETRY_DELAY_BACKOFF_FACTOR = 2.0
DEFAULT_TOTAL_RETRY_PERIOD_MILLIS = 50000


class RetryParams(BaseModel):
    """Parameters for request retries. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    retry_min_attempts: int = Field(DEFAULT_RETRY_MIN_ATTEMPTS, ge=0)
    retry_max_attempts: int = Field(DEFAULT_RETRY_MAX_ATTEMPTS, ge=0)
    initial_retry_delay_millis: int = Field(DEFAULT_INITIAL_RETRY_DELAY_MILLIS, ge=0)
    max_retry_delay_millis: int = Field(DEFAULT_MAX_RETRY_DELAY_MILLIS, ge=0)
    retry_delay_backoff_factor: float = Field(DEFAULT_RETRY_DELAY_BACKOFF_FACTOR, ge=1.0)
    total_retry_period_millis: int = Field(DEFAULT_TOTAL_RETRY_PERIOD_MILLIS, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.retry_max_attempts < self.retry_min_attempts:
            raise ValueError("retry_max_attempts must not be less than retry_min_attempts")
        if self.max_retry_delay_millis < self.initial_retry_delay_millis:
            raise ValueError("max_retry_delay_millis must not be less than initial_retry_delay_millis")
        return self

    @classmethod
    def default_instance(cls):
        return _DEFAULT_INSTANCE

    @classmethod
    def no_retries(cls):
        return _NO_RETRIES


_DEFAULT_INSTANCE = RetryParams()
_NO_RETRIES = RetryParams(
    retry_min_attempts=0,
    retry_max_attempts=0,
    initial_retry_delay_millis=0,
    max_retry_delay_millis=0,
    retry_delay_backoff_factor=1.0,
    total_retry_period_millis=0,
)
