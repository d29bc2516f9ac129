"""Command-line interface for inspecting job listings exported from the jobs API."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from careermade_jobs.config import settings
from careermade_jobs.core.models import ListingScope, Posting, postings_from_payload
from careermade_jobs.listing.facets import FacetDimension, facet_counts
from careermade_jobs.listing.filters import CascadeInvariantError, FilterState
from careermade_jobs.listing.formatting import applied_filters_count, format_salary_lpa
from careermade_jobs.listing.view import JobListing
from careermade_jobs.taxonomy.classifier import classify
from careermade_jobs.taxonomy.registry import JOB_TYPES, LOCATIONS, SPECIALIZATIONS, default_registry
from careermade_jobs.utils.logging import configure_logging

app = typer.Typer(
    name="careermade-jobs",
    help="CareerMade Jobs - classify and filter healthcare job postings",
    add_completion=False,
)
console = Console()


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
    debug: Optional[bool] = typer.Option(None, "--debug/--no-debug", help="Human-readable log lines"),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(level=log_level, debug=debug)


def _load_postings(path: Path) -> List[Posting]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Could not read postings from {path}: {e}[/red]")
        raise typer.Exit(code=1)
    return postings_from_payload(payload)


def _facet_options(dimension: FacetDimension, state: FilterState) -> List[str]:
    if dimension is FacetDimension.CATEGORY:
        return default_registry.categories()
    if dimension is FacetDimension.SUBCATEGORY:
        return default_registry.subcategories_of(state.category) if state.category else []
    if dimension is FacetDimension.FIELD:
        if state.category and state.subcategory:
            return default_registry.fields_of(state.category, state.subcategory)
        return []
    if dimension is FacetDimension.LOCATION:
        return list(LOCATIONS)
    if dimension is FacetDimension.JOB_TYPE:
        return list(JOB_TYPES)
    return list(SPECIALIZATIONS)


@app.command()
def taxonomy() -> None:
    """Show the Category -> Subcategory -> Field hierarchy."""
    tree = Tree("Taxonomy")
    for category in default_registry.categories():
        category_node = tree.add(f"[bold cyan]{category}[/bold cyan]")
        for subcategory in default_registry.subcategories_of(category):
            sub_node = category_node.add(f"[green]{subcategory}[/green]")
            for field in default_registry.fields_of(category, subcategory):
                sub_node.add(field)
    console.print(tree)


@app.command(name="classify")
def classify_postings(
    path: Path = typer.Argument(..., help="JSON export of the jobs API response"),
) -> None:
    """Classify every posting in a JSON export."""
    postings = _load_postings(path)
    table = Table(title=f"Classification of {len(postings)} postings")
    table.add_column("Title", style="cyan")
    table.add_column("Specialization")
    table.add_column("Category", style="green")
    table.add_column("Subcategory", style="green")
    table.add_column("Field", style="green")

    for posting in postings:
        result = classify(posting)
        table.add_row(
            posting.title or "—",
            posting.specialization_text or "—",
            result.category,
            result.subcategory,
            result.field,
        )
    console.print(table)


@app.command()
def search(
    path: Path = typer.Argument(..., help="JSON export of the jobs API response"),
    category: Optional[str] = typer.Option(None, help="Category to keep"),
    subcategory: Optional[str] = typer.Option(None, help="Subcategory to keep (needs --category)"),
    field: Optional[str] = typer.Option(None, help="Field to keep (needs --subcategory)"),
    location: List[str] = typer.Option([], "--location", "-l", help="Location; repeat for several"),
    job_type: List[str] = typer.Option([], "--job-type", "-t", help="Job type; repeat for several"),
    specialization: List[str] = typer.Option([], "--specialization", "-s", help="Specialization; repeat"),
    min_experience: int = typer.Option(0, help="Minimum years of experience the posting asks for"),
    min_salary: float = typer.Option(0.0, help="Minimum salary in LPA"),
    query: str = typer.Option("", "--query", "-q", help="Free-text search"),
    scope: ListingScope = typer.Option(ListingScope.PUBLIC, help="Listing scope"),
    page: int = typer.Option(1, help="Page number"),
    page_size: int = typer.Option(settings.page_size, help="Postings per page"),
) -> None:
    """Filter and paginate postings from a JSON export."""
    postings = _load_postings(path)

    try:
        state = FilterState().with_category(category).with_subcategory(subcategory).with_field(field)
    except CascadeInvariantError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)
    for value in location:
        state = state.toggle_location(value)
    for value in job_type:
        state = state.toggle_job_type(value)
    for value in specialization:
        state = state.toggle_specialization(value)
    state = state.with_min_experience(min_experience).with_min_salary(min_salary).with_query(query)

    listing = JobListing(postings, scope=scope, page_size=page_size)
    listing.apply(state)
    current = listing.go_to(page)

    if not listing.has_results:
        console.print("No jobs match the selected filters.")
        return

    table = Table(
        title=(
            f"Page {current.page_number}/{current.total_pages} - "
            f"{current.total_items} matching, {applied_filters_count(state)} filters applied"
        )
    )
    table.add_column("Title", style="cyan")
    table.add_column("Location")
    table.add_column("Type")
    table.add_column("Experience")
    table.add_column("Salary", style="green")

    for posting in current.items:
        place = ", ".join(p for p in (posting.location.city, posting.location.state) if p)
        min_years = posting.experience_required.min_years
        table.add_row(
            posting.title or "—",
            place or "—",
            posting.job_type.value if posting.job_type else "Full-time",
            f"{min_years:g}+ yrs" if min_years else "—",
            format_salary_lpa(posting.salary.max),
        )
    console.print(table)


@app.command()
def facets(
    path: Path = typer.Argument(..., help="JSON export of the jobs API response"),
    dimension: FacetDimension = typer.Argument(..., help="Facet to count"),
    category: Optional[str] = typer.Option(None, help="Parent category for subcategory/field counts"),
    subcategory: Optional[str] = typer.Option(None, help="Parent subcategory for field counts"),
) -> None:
    """Count postings per option of a facet over the whole export."""
    postings = _load_postings(path)
    try:
        state = FilterState().with_category(category).with_subcategory(subcategory)
    except CascadeInvariantError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    options = _facet_options(dimension, state)
    if not options:
        console.print(f"[yellow]Select a parent rank to list {dimension.value} options.[/yellow]")
        raise typer.Exit(code=2)

    table = Table(title=f"{dimension.value} counts")
    table.add_column("Option", style="cyan")
    table.add_column("Postings", style="green", justify="right")
    for option, count in facet_counts(postings, dimension, options).items():
        table.add_row(option, str(count))
    console.print(table)


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="CareerMade Jobs Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Log Level", settings.log_level)
    table.add_row("Page Size", str(settings.page_size))
    table.add_row("Salary Unit", str(settings.salary_unit))
    table.add_row("Currency Symbol", settings.currency_symbol)

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from careermade_jobs import __version__
    console.print(f"CareerMade Jobs v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
