"""
Owner Console
Flask backend-for-frontend between the console pages and the REST API
"""
import logging

from flask import Flask

from owner_console.components.activity import init_activity
from owner_console.components.auth import init_auth
from owner_console.components.budgets import init_budgets
from owner_console.components.categories import init_categories
from owner_console.components.cron_jobs import init_cron_jobs
from owner_console.components.financial_goals import init_financial_goals
from owner_console.components.health import init_health
from owner_console.components.imports import init_imports
from owner_console.components.metrics import init_metrics
from owner_console.components.portfolio import init_portfolio
from owner_console.components.queues import init_queues
from owner_console.components.recurring_transactions import init_recurring_transactions
from owner_console.components.settings import init_settings
from owner_console.components.transaction_templates import init_transaction_templates
from owner_console.components.transactions import init_transactions
from owner_console.config.settings import ConsoleConfig
from owner_console.core.api_client import init_api_client
from owner_console.core.monitoring import ActivityLog, UpstreamMonitor
from owner_console.core.responses import error
from owner_console.extensions import limiter
from owner_console.routes.main_routes import main_bp

logger = logging.getLogger(__name__)


class ConsoleApp:
    """Main console application class"""

    def __init__(self):
        self.app = None
        self.monitor = None

    def create_app(self, config_object=ConsoleConfig, http_session=None):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(config_object)

        # Initialize extensions
        limiter.init_app(self.app)
        init_api_client(self.app, http_session)

        # Initialize monitoring
        activity_log = ActivityLog(maxlen=self.app.config['MAX_ACTIVITY_ENTRIES'])
        self.monitor = UpstreamMonitor(
            self.app.config['API_URL'],
            activity_log,
            interval=self.app.config['HEALTH_CHECK_INTERVAL'],
            timeout=self.app.config['HEALTH_CHECK_TIMEOUT'],
            http_session=self.app.extensions['http_session'],
        )
        self.app.extensions['activity_log'] = activity_log
        self.app.extensions['upstream_monitor'] = self.monitor

        # Initialize components
        init_auth(self.app)
        init_cron_jobs(self.app)
        init_metrics(self.app)
        init_health(self.app)
        init_queues(self.app)
        init_transactions(self.app)
        init_categories(self.app)
        init_budgets(self.app)
        init_recurring_transactions(self.app)
        init_transaction_templates(self.app)
        init_financial_goals(self.app)
        init_imports(self.app)
        init_portfolio(self.app)
        init_settings(self.app)
        init_activity(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        self._register_error_handlers()
        return self.app

    def _register_error_handlers(self):
        app = self.app

        @app.errorhandler(404)
        def not_found(e):
            return error('Not found', 404)

        @app.errorhandler(405)
        def method_not_allowed(e):
            return error('Method not allowed', 405)

        @app.errorhandler(429)
        def rate_limited(e):
            return error(f'Too many requests: {e.description}', 429)

        @app.errorhandler(500)
        def internal_error(e):
            original = getattr(e, 'original_exception', None) or e
            logger.exception(f'[API] Unhandled error: {original}', exc_info=original)
            app.extensions['activity_log'].add('ERROR', f'Unhandled error: {original}')
            return error('Internal server error', 500)

    def run(self):
        """Start the console application"""
        config = self.app.config
        if config.get('MONITOR_ENABLED'):
            self.monitor.start()
        self.app.extensions['activity_log'].add('INFO', 'Owner console started')

        logger.info('Owner Console')
        logger.info(f"Starting on: http://{config['HOST']}:{config['PORT']}")
        logger.info(f"Backend API: {config['API_URL']}")

        try:
            self.app.run(host=config['HOST'], port=config['PORT'], debug=False)
        finally:
            self.monitor.stop()


def main():
    """Main entry point"""
    logging.basicConfig(
        level=getattr(logging, ConsoleConfig.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    console = ConsoleApp()
    console.create_app()
    console.run()


if __name__ == '__main__':
    main()
