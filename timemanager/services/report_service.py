"""
Report Generation Service using Jinja2 templates.

Architecture Decision: Template Pattern
Allows users to customize the dashboard summary without changing code.
"""

from pathlib import Path
from typing import List, Optional
from jinja2 import Environment, FileSystemLoader

from timemanager.i18n import tr, format_money
from timemanager.services.store import DashboardStore
from timemanager.services.timer_service import format_time
from timemanager.utils import get_resource_path


class ReportService:
    """
    Renders the dashboard figures of a store through a Jinja2 template.
    """

    def __init__(self, template_dir: Optional[Path] = None, currency: str = "BRL"):
        """
        Initialize the report service.

        Args:
            template_dir: Directory containing Jinja2 templates
            currency: ISO code used by the money filter
        """
        if template_dir is None:
            template_dir = get_resource_path("resources/templates")

        self.template_dir = template_dir
        self.currency = currency

        # Setup Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True
        )

        # Add custom filters and helpers
        self.env.filters['format_duration'] = format_time
        self.env.filters['money'] = lambda amount: format_money(amount, self.currency)
        self.env.globals['tr'] = tr

    def build_context(self, store: DashboardStore) -> dict:
        """Collect everything the summary template shows"""
        monthly = store.monthly_series()
        return {
            'generated_at': store.clock(),
            'today_minutes': store.today_minutes(),
            'active_tasks': store.active_task_count(),
            'recent_tasks': store.recent_tasks(),
            'finance': store.finance_summary(),
            'months': list(zip(monthly.labels, monthly.income, monthly.expense)),
            'categories': store.categories,
            'timer': store.timer_state,
        }

    def render_summary(self, store: DashboardStore,
                       template_name: str = "dashboard_summary.txt",
                       output_file: Optional[Path] = None) -> str:
        """
        Render the dashboard summary.

        Args:
            store: The dashboard state to report on
            template_name: Name of the template file
            output_file: Optional file path to save the report

        Returns:
            The rendered report as a string
        """
        template = self.env.get_template(template_name)
        content = template.render(**self.build_context(store))

        # Save to file if specified
        if output_file:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write(content)

        return content

    def list_templates(self) -> List[str]:
        """List all available template files"""
        return [f.name for f in self.template_dir.glob("*.txt")] + \
               [f.name for f in self.template_dir.glob("*.md")]
