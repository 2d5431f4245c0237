"""バッチタスク（import時にレジストリへ自動登録）"""

from . import login_attempt_cleanup  # noqa: F401
