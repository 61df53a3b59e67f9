"""Render a fetched problem into a local source file."""

from loguru import logger

from domain.languages import extension_for
from domain.models import OutputOptions, Problem, RenderedFile
from domain.parsers.html_decoder import decode


class ContentAssembler:
    """Builds the file name and body for a problem."""

    def assemble(self, problem: Problem, options: OutputOptions) -> RenderedFile:
        """
        Render ``problem`` according to ``options``.

        The body is the header, then the decoded statement unless bare mode
        is on, then the starter snippet for ``options.language``.
        """
        file_name = self.file_name(problem, options)

        body = self._header(problem)
        if not options.bare_mode:
            body += f"{decode(problem.content_html)}\n"
        body += self._snippet(problem, options.language)

        logger.debug(f"Assembled {file_name} ({len(body)} chars)")
        return RenderedFile(file_name=file_name, body=body)

    def file_name(self, problem: Problem, options: OutputOptions) -> str:
        stem = problem.title_slug if options.use_slug_as_filename else problem.frontend_id
        return f"{stem}.{extension_for(options.language)}"

    def _header(self, problem: Problem) -> str:
        return f"{problem.frontend_id} {problem.title}\n{problem.link} - {problem.difficulty.value}\n\n"

    def _snippet(self, problem: Problem, language: str) -> str:
        snippet = problem.snippet_for(language)
        if snippet is None:
            logger.warning(f"No {language} snippet for problem {problem.frontend_id}")
            return f"// No {language} code available"
        return snippet.code
