import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio.contexts.templating.defaults import TemplateCategory
from folio.contexts.templating.exceptions import TemplateNotFoundError
from folio.contexts.templating.logger import _log_warning, log_template_loaded
from folio.contexts.templating.template_data_structure import Template, check_section_coupling

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("FOLIO_TEMPLATES_PATH", Path(__file__).parent / "builtin_templates")
)


class TemplateRegistry:
    """
    Registry for loading and caching resume template records.

    Each template lives in {templates_path}/{template_id}.yaml and holds the
    HTML fragments, styling fields and gallery metadata of one Template.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory of template YAML files. Defaults to
                           FOLIO_TEMPLATES_PATH from environment, else the
                           packaged built-in templates
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

    def get_template(self, template_id: str) -> Template:
        """
        Get a template by id, loading and caching it if necessary.

        Args:
            template_id: File stem of the template (e.g., 'professional_classic')

        Returns:
            Template record

        Raises:
            TemplateNotFoundError: If no file exists for the id
            InvalidTemplateError: If the file is not a valid template record
        """
        if template_id in self._cache:
            return self._cache[template_id]

        template_path = self.get_template_path(template_id)

        if not template_path.exists():
            raise TemplateNotFoundError(
                template_id,
                templates_path=self.templates_path,
                available=self.list_template_ids(),
            )

        record = OmegaConf.to_container(OmegaConf.load(template_path), resolve=True)
        template = Template.from_dict(record, template_id=template_id, template_path=template_path)
        log_template_loaded(template_id, template_path)

        for fragment in check_section_coupling(template):
            _log_warning(
                f"Template '{template_id}': {fragment} does not open a <section> "
                f"element, but the assembler closes that section with </section>"
            )

        self._cache[template_id] = template
        return template

    def get_template_path(self, template_id: str) -> Path:
        """
        Get the file path for a template id.

        Args:
            template_id: File stem of the template

        Returns:
            Path to the template's YAML file
        """
        return self.templates_path / f"{template_id}.yaml"

    def list_template_ids(self) -> List[str]:
        """Return the ids of every template file, sorted."""
        if not self.templates_path.is_dir():
            return []
        return sorted(path.stem for path in self.templates_path.glob("*.yaml"))

    def list_templates(
        self,
        category: Optional[Union[TemplateCategory, str]] = None,
        tags: Optional[Iterable[str]] = None,
        public_only: bool = True,
    ) -> List[Template]:
        """
        List templates for the gallery, optionally filtered.

        Args:
            category: Only templates in this category
            tags: Only templates carrying at least one of these tags (case-insensitive)
            public_only: Hide templates whose is_public flag is false

        Returns:
            Matching templates sorted by name

        Raises:
            ValueError: If category is not a known TemplateCategory
        """
        if category is not None:
            category = TemplateCategory(category)
        wanted_tags = {tag.lower() for tag in tags} if tags else set()

        templates = []
        for template_id in self.list_template_ids():
            template = self.get_template(template_id)

            if public_only and not template.is_public:
                continue
            if category is not None and template.category != category:
                continue
            if wanted_tags and not wanted_tags & {tag.lower() for tag in template.tags}:
                continue

            templates.append(template)

        return sorted(templates, key=lambda t: t.name.lower())

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_id: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            template_id: Template id

        Returns:
            True if cached, False otherwise
        """
        return template_id in self._cache
