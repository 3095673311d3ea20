import typer

from typer import Argument, Option

app = typer.Typer(help="Pageforge maintenance commands")

DEMO_TEMPLATE_HTML = """<section class="hero" style="background: {{heroBackground}}">
  <img src="{{logoImage}}" alt="logo">
  <h1>{{heroTitle}}</h1>
  <p data-element="heroSubtitle">Subtitle</p>
  <a href="{{ctaLink}}">{{ctaText}}</a>
</section>"""

DEMO_TEMPLATE_CSS = """:root { --primary: #3B82F6; }
body.dark { background: #111827; color: #f9fafb; }
.hero { padding: 4rem 2rem; text-align: center; }
.hero a { color: var(--primary); }"""


@app.command()
def create_customer(
    name: str = Argument(...),
    email: str = Argument(...),
):
    """Create a customer that pages can be assigned to."""
    from db.session import db_context
    from repositories.customer_repository import CustomerRepository

    with db_context() as db:
        repository = CustomerRepository(db)
        if repository.get_by_email(email):
            typer.echo(f"Customer with email {email} already exists", err=True)
            raise typer.Exit(code=1)
        customer = repository.create(name=name, email=email)
        typer.echo(str(customer.id))


@app.command()
def seed_demo(
    slug: str = Option("demo", "--slug"),
    email: str = Option("demo@pageforge.dev", "--email"),
):
    """Create a demo customer, template and published page."""
    from core.exceptions import PageforgeError
    from db.session import db_context
    from repositories.customer_repository import CustomerRepository
    from schemas.page import PageCreate
    from schemas.template import TemplateCreate
    from services.page_service import PageService
    from repositories.page_repository import PageRepository
    from repositories.template_repository import TemplateRepository

    with db_context() as db:
        customer_repository = CustomerRepository(db)
        template_repository = TemplateRepository(db)
        page_service = PageService(PageRepository(db), template_repository, customer_repository)

        customer = customer_repository.get_by_email(email) or customer_repository.create(
            name="Demo Customer", email=email
        )
        template = template_repository.create(
            TemplateCreate(name="Demo landing", html_content=DEMO_TEMPLATE_HTML, css_content=DEMO_TEMPLATE_CSS)
        )

        try:
            page = page_service.create_from_template(
                PageCreate(template_id=template.id, customer_id=customer.id, name="Demo page", slug=slug)
            )
        except PageforgeError as e:
            typer.echo(f"{e.kind.value}: {e.message}", err=True)
            raise typer.Exit(code=1)

        page_service.publish(page.id)
        typer.echo(f"Published /p/{page.slug} with {len(page.elements)} elements")


@app.command()
def render(slug: str = Argument(...)):
    """Print the HTML the public route would serve for SLUG."""
    from db.session import db_context
    from repositories.page_repository import PageRepository
    from services.page_render_service import PageRenderService, RenderStatus
    from services.render_cache import MemoryRenderCache

    with db_context() as db:
        service = PageRenderService(PageRepository(db), MemoryRenderCache())
        result = service.render_by_slug(slug)

    typer.echo(result.html)
    if result.status != RenderStatus.OK:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
