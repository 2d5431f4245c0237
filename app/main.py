"""アプリケーションエントリーポイント"""

from app.core.app_factory import create_app
from app.core.monitoring import init_monitoring

init_monitoring()

app = create_app()
