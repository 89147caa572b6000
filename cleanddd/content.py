"""
Static site content.

Articles, events and framework entries are defined once at import time and are
never mutated afterwards. The order of each collection is the order in which the
site lists it.
"""

from __future__ import annotations

from typing import Tuple

from cleanddd.model import (
    Article,
    Event,
    Framework,
    PastEvent,
    Registration,
    RegistrationOption,
    ScheduleDay,
    Session,
)


# ---------------------------------------------------------------------------
# Knowledge base
# ---------------------------------------------------------------------------

_STRATEGIC_DDD = """
<h2>Introduction to Strategic Domain-Driven Design</h2>
<p>Strategic Domain-Driven Design focuses on the large-scale structure of a system. It provides tools and
practices for dealing with large models and teams, defining the relationships between different parts of the
system, and keeping the design coherent as the system evolves.</p>

<h3>Key Concepts in Strategic DDD</h3>
<h4>Bounded Context</h4>
<p>A Bounded Context is a conceptual boundary within which a particular domain model applies. The same term may
have different meanings in different bounded contexts: a "Product" in the Catalog context is not the "Product"
of the Inventory or Order Processing context.</p>
<h4>Context Map</h4>
<p>A Context Map shows the relationships between the bounded contexts of a system. It helps teams see
communication paths, dependencies and potential issues in the overall design.</p>
<h4>Ubiquitous Language</h4>
<p>Ubiquitous Language is a shared language between domain experts and developers that evolves within a bounded
context. It is used in every conversation and in the code itself.</p>

<h3>Relationship Patterns between Bounded Contexts</h3>
<ul>
  <li><strong>Partnership</strong>: teams align their goals and succeed or fail together.</li>
  <li><strong>Shared Kernel</strong>: contexts share a subset of the model and coordinate every change to it.</li>
  <li><strong>Customer-Supplier</strong>: the upstream supplier serves the downstream customer.</li>
  <li><strong>Conformist</strong>: the downstream context simply adopts the upstream model.</li>
  <li><strong>Anti-Corruption Layer</strong>: a translation layer protects one model from another.</li>
  <li><strong>Open Host Service</strong>: a context exposes a protocol any other context can use.</li>
  <li><strong>Published Language</strong>: a documented language shared by several contexts.</li>
  <li><strong>Separate Ways</strong>: contexts with no integration at all.</li>
</ul>

<h3>Applying Strategic DDD</h3>
<ol>
  <li><strong>Identify bounded contexts</strong>: look for areas with different languages, teams or responsibilities.</li>
  <li><strong>Create a context map</strong>: document the relationships between your bounded contexts.</li>
  <li><strong>Define integration strategies</strong>: pick a relationship pattern for every connection.</li>
  <li><strong>Establish team boundaries</strong>: align teams with bounded contexts.</li>
  <li><strong>Evolve the design</strong>: refine contexts and the map as you learn more about the domain.</li>
</ol>

<h3>Conclusion</h3>
<p>Identifying bounded contexts, mapping their relationships and choosing integration strategies deliberately
leads to a more maintainable and coherent system design.</p>
"""

_TACTICAL_PATTERNS = """
<h2>Tactical Patterns in Domain-Driven Design</h2>
<p>Tactical DDD provides the building blocks for implementing domain models. These patterns translate the
conceptual model into code while preserving the meaning and behaviour of the domain.</p>

<h3>Building Blocks of Tactical DDD</h3>
<h4>Entities</h4>
<p>Entities have a distinct identity that runs through time and different states. A "Person" stays the same
person even when every attribute changes.</p>
<h4>Value Objects</h4>
<p>Value Objects have no conceptual identity. They are defined by their attributes and are immutable: two
"Money" values with the same amount and currency are equal.</p>
<h4>Aggregates</h4>
<p>Aggregates are clusters of entities and value objects with a clear boundary. All access goes through the
aggregate root, which enforces the invariants of the aggregate.</p>
<h4>Domain Events</h4>
<p>Domain Events record something significant that happened in the domain, such as "OrderPlaced". They are
immutable and are often used to communicate between bounded contexts.</p>
<h4>Repositories</h4>
<p>Repositories hand out references to aggregates and hide the infrastructure needed to store and retrieve them.</p>
<h4>Services</h4>
<p>Domain services hold domain logic that belongs to no single entity or value object. Application services
orchestrate domain objects to fulfil a use case.</p>
<h4>Factories</h4>
<p>Factories encapsulate the creation of complex aggregates and guarantee a valid initial state.</p>

<h3>Implementing Tactical DDD Patterns</h3>
<ol>
  <li><strong>Identify entities and value objects</strong>.</li>
  <li><strong>Define aggregate boundaries</strong> and their roots.</li>
  <li><strong>Implement repositories</strong> per aggregate type.</li>
  <li><strong>Use domain events</strong> for significant state changes.</li>
  <li><strong>Apply services and factories</strong> where behaviour has no natural home.</li>
</ol>

<h3>Conclusion</h3>
<p>Used together, these building blocks produce a domain model that reflects the concepts and behaviour of the
business domain.</p>
"""

_CLEAN_ARCHITECTURE = """
<h2>Integrating Domain-Driven Design with Clean Architecture</h2>
<p>DDD and Clean Architecture are complementary: one gives a rich model of the domain, the other a dependency
structure that keeps that model independent of frameworks, UI, databases and external agencies.</p>

<h3>Understanding Clean Architecture</h3>
<p>The architecture is drawn as concentric circles: Entities, Use Cases, Interface Adapters and Frameworks and
Drivers. Dependencies only point inward.</p>

<h3>Mapping DDD Concepts to Clean Architecture</h3>
<h4>Entities Layer</h4>
<p>Holds the DDD domain model: entities, value objects, aggregates, domain events and domain services.</p>
<h4>Use Cases Layer</h4>
<p>Holds application services, command and query objects and DTOs.</p>
<h4>Interface Adapters Layer</h4>
<p>Holds repository implementations, controllers, presenters and gateways to external services.</p>
<h4>Frameworks and Drivers Layer</h4>
<p>Holds web frameworks, database libraries, UI components and external APIs.</p>

<h3>Implementing the Integration</h3>
<ul>
  <li>Define repository interfaces in the domain layer and implement them in infrastructure.</li>
  <li>Keep the domain model free of persistence annotations and framework imports.</li>
  <li>Use bounded contexts as module boundaries, each with its own layers.</li>
  <li>Apply CQRS where reads and writes need different models.</li>
</ul>

<h3>Example Project Structure</h3>
<pre>
src/
  domain/
  application/
  infrastructure/
  interfaces/
</pre>

<h3>Conclusion</h3>
<p>The combination yields systems that are focused on the business domain and architecturally sound.</p>
"""

_EVENT_STORMING = """
<h2>Event Storming: Collaborative Domain Modeling</h2>
<p>Event Storming is a workshop format, developed by Alberto Brandolini, that brings domain experts and technical
team members together to build a shared understanding of a business process.</p>

<h3>What is Event Storming?</h3>
<p>Participants place sticky notes on a timeline, starting from domain events: things that happen in the
business. It is useful for exploring complex domains, identifying bounded contexts and discovering edge cases.</p>

<h3>The Event Storming Process</h3>
<h4>1. Setup</h4>
<p>Prepare a long modeling surface and sticky notes: orange for domain events, blue for commands, yellow for
actors, lilac for external systems, pink for problems and purple for policies.</p>
<h4>2. Chaotic Exploration</h4>
<p>Write domain events in past tense ("Order Placed") and put them on the timeline in rough order.</p>
<h4>3. Timeline Reorganization</h4>
<p>Turn the events into a coherent timeline and spot clusters that belong together.</p>
<h4>4. Commands and Actors</h4>
<p>For each event, find what caused it: a command issued by an actor, another event, or a time-based trigger.</p>
<h4>5. Policies and Read Models</h4>
<p>Capture the business rules that react to events and the information users need to decide.</p>
<h4>6. Bounded Contexts</h4>
<p>Look for places where the language changes; they are candidate context boundaries.</p>

<h3>Tips for Effective Event Storming</h3>
<ul>
  <li><strong>Invite the right people</strong>: domain experts, developers and other stakeholders.</li>
  <li><strong>Keep it informal</strong>: stand-up format, no presentations.</li>
  <li><strong>Use a facilitator</strong> and <strong>document outcomes</strong> with photos.</li>
</ul>

<h3>Conclusion</h3>
<p>Event Storming turns a wall of sticky notes into aggregates, commands and bounded contexts you can implement.</p>
"""

_BOUNDED_CONTEXTS = """
<h2>Bounded Contexts in Practice</h2>
<p>Drawing context boundaries is easy on a whiteboard and hard in a real organisation. This article walks through
examples from three domains.</p>

<h3>E-commerce</h3>
<p>Catalog, Ordering, Payment and Shipping each own a different notion of "Product". The Catalog cares about
descriptions and images; Shipping only about weight and dimensions.</p>

<h3>Insurance</h3>
<p>Underwriting, Policy Administration and Claims share the word "Policy" but disagree on its lifecycle. Separate
contexts let each team evolve its model without negotiating every field.</p>

<h3>Healthcare</h3>
<p>Scheduling and Clinical Records both talk about "Patients", but privacy rules and data retention differ.
An anti-corruption layer keeps the clinical model intact.</p>

<h3>Heuristics</h3>
<ul>
  <li>Follow changes in language.</li>
  <li>Follow team ownership.</li>
  <li>Follow differences in data consistency needs.</li>
</ul>
"""

_DOMAIN_EVENTS = """
<h2>Working with Domain Events</h2>
<p>A domain event captures a fact the business cares about. Naming it in past tense forces the team to agree on
what actually happened.</p>

<h3>Defining Events</h3>
<p>An event carries the identity of the aggregate that raised it, the moment it occurred and the data consumers
need. It never changes once published.</p>

<h3>Raising and Dispatching</h3>
<p>Aggregates record events while handling a command; the application layer dispatches them after the
transaction commits so handlers never observe uncommitted state.</p>

<h3>Consuming Events</h3>
<h4>Inside a Bounded Context</h4>
<p>Handlers update read models or trigger follow-up commands.</p>
<h4>Across Bounded Contexts</h4>
<p>Integration events are published through a message broker and translated on the receiving side.</p>

<h3>Conclusion</h3>
<p>Domain events make implicit state transitions explicit and give contexts a loose way to collaborate.</p>
"""

_MICROSERVICES_DDD = """
<h2>DDD and Microservices</h2>
<p>Microservices need boundaries, and bounded contexts are the best source of them.</p>

<h3>One Context, One or More Services</h3>
<p>A service should never span two bounded contexts. A large context may be split into several services as long
as they share one model and one team.</p>

<h3>Integration Styles</h3>
<ul>
  <li>Synchronous APIs published as an open host service.</li>
  <li>Asynchronous domain events through a broker.</li>
  <li>Anti-corruption layers at every boundary with a legacy system.</li>
</ul>

<h3>Data Ownership</h3>
<p>Each service owns its data store. Other services read through its API or keep a local projection fed by its
events.</p>

<h3>Conclusion</h3>
<p>Start from the context map, not from technology, when cutting a system into services.</p>
"""

_EXAMPLE_DRIVEN_DESIGN = """
<h2>Example-Driven Design</h2>
<p>Abstract requirements hide disagreement. Concrete examples expose it early, while it is still cheap to fix.</p>

<h3>Collecting Examples</h3>
<p>Ask domain experts for real cases: the last complicated order, the strangest claim, the customer who broke
the rules. Write each one down as a short scenario.</p>

<h3>Example Mapping</h3>
<p>Group examples under the business rule they illustrate. Rules without examples and examples without rules are
both signals that the model is incomplete.</p>

<h3>From Examples to Code</h3>
<p>Turn each example into an executable test that speaks the ubiquitous language. The tests become living
documentation of the model.</p>
"""


ARTICLES: Tuple[Article, ...] = (
    Article(
        id="strategic-ddd",
        title="Strategic Domain-Driven Design",
        description=(
            "Learn how to identify bounded contexts, create context maps, and implement domain models "
            "that represent business reality."
        ),
        category="guides",
        tag="Guide",
        created_at="2025-01-15",
        read_time="12 min read",
        author="Eric Evans",
        content=_STRATEGIC_DDD,
        related_articles=("tactical-patterns", "clean-architecture", "event-storming"),
    ),
    Article(
        id="tactical-patterns",
        title="Tactical Patterns in DDD",
        description=(
            "Explore entities, value objects, aggregates, and domain events for implementing robust domain models."
        ),
        category="patterns",
        tag="Patterns",
        created_at="2025-02-10",
        read_time="15 min read",
        author="Vaughn Vernon",
        content=_TACTICAL_PATTERNS,
        related_articles=("strategic-ddd", "clean-architecture", "event-storming"),
    ),
    Article(
        id="clean-architecture",
        title="Clean Architecture Integration",
        description=(
            "Combine DDD with Clean Architecture to create maintainable and testable systems with clear "
            "separation of concerns."
        ),
        category="architecture",
        tag="Architecture",
        created_at="2025-03-05",
        read_time="18 min read",
        author="Robert C. Martin",
        content=_CLEAN_ARCHITECTURE,
        related_articles=("strategic-ddd", "tactical-patterns", "event-storming"),
    ),
    Article(
        id="event-storming",
        title="Event Storming Workshops",
        description="Collaborative modeling technique for mapping business processes and identifying domain events.",
        category="practices",
        tag="Practice",
        created_at="2025-03-18",
        read_time="10 min read",
        author="Alberto Brandolini",
        content=_EVENT_STORMING,
        related_articles=("strategic-ddd", "tactical-patterns", "clean-architecture"),
    ),
    Article(
        id="bounded-contexts",
        title="Bounded Contexts in Practice",
        description="Real-world examples of identifying and implementing bounded contexts in different domains.",
        category="guides",
        tag="Guide",
        created_at="2025-04-02",
        read_time="14 min read",
        author="Nick Tune",
        content=_BOUNDED_CONTEXTS,
        # "context-mapping" has not been written yet
        related_articles=("strategic-ddd", "context-mapping", "microservices-ddd"),
    ),
    Article(
        id="domain-events",
        title="Working with Domain Events",
        description="How to define, implement, and use domain events effectively in your applications.",
        category="patterns",
        tag="Patterns",
        created_at="2025-04-20",
        read_time="11 min read",
        author="Mathias Verraes",
        content=_DOMAIN_EVENTS,
        related_articles=("tactical-patterns", "event-storming"),
    ),
    Article(
        id="microservices-ddd",
        title="DDD and Microservices",
        description="Strategies for applying Domain-Driven Design principles in a microservices architecture.",
        category="architecture",
        tag="Architecture",
        created_at="2025-05-08",
        read_time="16 min read",
        author="Sam Newman",
        content=_MICROSERVICES_DDD,
        related_articles=("bounded-contexts", "domain-events", "clean-architecture"),
    ),
    Article(
        id="example-driven-design",
        title="Example-Driven Design",
        description="Using concrete examples to drive the design process and create more robust domain models.",
        category="practices",
        tag="Practice",
        created_at="2025-05-27",
        read_time="9 min read",
        author="Cyrille Martraire",
        content=_EXAMPLE_DRIVEN_DESIGN,
        related_articles=("event-storming",),
    ),
)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

EVENTS: Tuple[Event, ...] = (
    Event(
        id="ddd-europe-2025",
        title="DDD Europe Conference",
        date="June 15-17, 2025",
        time="9:00 AM - 6:00 PM CEST",
        location="Amsterdam, Netherlands",
        description=(
            "The premier conference for Domain-Driven Design practitioners and enthusiasts in Europe. "
            "Join us for three days of workshops, talks, and networking with the leading experts in DDD."
        ),
        long_description=(
            "DDD Europe is the leading Domain-Driven Design conference bringing together practitioners from "
            "around the world. The 2025 edition will feature workshops on strategic design, tactical patterns, "
            "and the integration of DDD with modern architectural styles.\n\n"
            "Day 1 will focus on introductory workshops for those new to DDD. Days 2 and 3 will include "
            "keynotes, breakout sessions, and deep-dive workshops on advanced topics. Networking events will "
            "be held each evening."
        ),
        speakers=("Eric Evans", "Vaughn Vernon", "Alberto Brandolini", "Julie Lerman"),
        venue="RAI Amsterdam Convention Center",
        venue_address="Europaplein 24, 1078 GZ Amsterdam, Netherlands",
        attendees=800,
        link="https://dddeurope.com",
        registration=Registration(
            open=True,
            deadline="May 30, 2025",
            price="€899 - €1299",
            options=(
                RegistrationOption("Early Bird", "€899", available=False),
                RegistrationOption("Regular", "€1099", available=True),
                RegistrationOption("Late Registration", "€1299", available=True),
            ),
        ),
        schedule=(
            ScheduleDay(
                "Day 1",
                "June 15",
                (
                    Session("09:00 - 10:00", "Registration & Coffee"),
                    Session("10:00 - 12:00", "Opening Keynote: The Future of DDD", "Eric Evans"),
                    Session("12:00 - 13:00", "Lunch"),
                    Session("13:00 - 15:00", "Workshop: Strategic Design in Practice", "Vaughn Vernon"),
                    Session("15:00 - 15:30", "Coffee Break"),
                    Session("15:30 - 17:30", "Panel Discussion: DDD in Different Domains"),
                    Session("18:00 - 20:00", "Welcome Reception"),
                ),
            ),
            ScheduleDay(
                "Day 2",
                "June 16",
                (
                    Session("09:00 - 09:30", "Coffee & Networking"),
                    Session("09:30 - 11:30", "Workshop: Event Storming Masterclass", "Alberto Brandolini"),
                    Session("11:30 - 12:30", "Talk: DDD and Microservices"),
                    Session("12:30 - 13:30", "Lunch"),
                    Session("13:30 - 15:30", "Parallel Sessions (Multiple Tracks)"),
                    Session("15:30 - 16:00", "Coffee Break"),
                    Session("16:00 - 18:00", "Hands-on Labs"),
                    Session("19:00 - 22:00", "Conference Dinner"),
                ),
            ),
            ScheduleDay(
                "Day 3",
                "June 17",
                (
                    Session("09:00 - 09:30", "Coffee & Networking"),
                    Session("09:30 - 11:30", "Workshop: DDD and Legacy Systems", "Julie Lerman"),
                    Session("11:30 - 12:30", "Case Studies: DDD Success Stories"),
                    Session("12:30 - 13:30", "Lunch"),
                    Session("13:30 - 15:30", "Open Space Sessions"),
                    Session("15:30 - 16:00", "Coffee Break"),
                    Session("16:00 - 17:30", "Closing Keynote and Q&A"),
                    Session("17:30 - 18:00", "Conference Closing"),
                ),
            ),
        ),
        past_events=(
            PastEvent("2024", "Amsterdam", 750),
            PastEvent("2023", "Amsterdam", 680),
            PastEvent("2022", "Online", 1200),
        ),
    ),
    Event(
        id="clean-architecture-workshop",
        title="Clean Architecture Workshop",
        date="July 23, 2025",
        time="10:00 AM - 5:00 PM EST",
        location="Online (Zoom)",
        description=(
            "Hands-on workshop exploring the integration of Clean Architecture with Domain-Driven Design principles."
        ),
        long_description=(
            "This intensive one-day workshop will teach you how to implement Clean Architecture principles in "
            "your DDD-based applications. We'll cover the theoretical foundations and then build a sample "
            "application using Clean Architecture and DDD patterns.\n\n"
            "Topics include architectural boundaries, dependency inversion, use cases, adapters, and how to "
            "organize your domain model within a Clean Architecture structure."
        ),
        speakers=("Robert C. Martin", "Jane Doe"),
        venue="Zoom Webinar",
        venue_address="Online",
        attendees=150,
        link="#",
        registration=Registration(
            open=True,
            deadline="July 20, 2025",
            price="$299",
            options=(
                RegistrationOption("Early Bird", "$249", available=False),
                RegistrationOption("Regular", "$299", available=True),
                RegistrationOption("Team (5+ attendees)", "$249 per person", available=True),
            ),
        ),
        schedule=(
            ScheduleDay(
                "Workshop Day",
                "July 23",
                (
                    Session("10:00 - 10:30", "Introduction and Overview"),
                    Session("10:30 - 12:00", "Clean Architecture Principles", "Robert C. Martin"),
                    Session("12:00 - 12:45", "Break"),
                    Session("12:45 - 14:15", "DDD and Clean Architecture Integration", "Jane Doe"),
                    Session("14:15 - 14:30", "Short Break"),
                    Session("14:30 - 16:30", "Hands-on Exercise: Building a Clean DDD Application"),
                    Session("16:30 - 17:00", "Q&A and Closing"),
                ),
            ),
        ),
        past_events=(
            PastEvent("January 2025", "Online", 130),
            PastEvent("October 2024", "Online", 125),
        ),
    ),
    Event(
        id="domain-modeling-meetup",
        title="Domain Modeling Meetup",
        date="August 5, 2025",
        time="6:30 PM - 9:00 PM CET",
        location="Berlin, Germany",
        description="Monthly meetup for discussing domain modeling challenges and solutions in complex business domains.",
        long_description=(
            "Our monthly Domain Modeling Meetup brings together practitioners to discuss real-world modeling "
            "challenges and solutions. This session focuses on domain modeling in financial services, with "
            "presentations from industry experts followed by an open discussion.\n\n"
            "This is a community-driven event where participants are encouraged to share their experiences, "
            "challenges, and solutions."
        ),
        speakers=("Alice Wagner", "Thomas Schmidt"),
        venue="TechHub Berlin",
        venue_address="Markgrafenstraße 5, 10969 Berlin, Germany",
        attendees=50,
        link="#",
        registration=Registration(
            open=True,
            deadline="August 4, 2025",
            price="Free",
            options=(RegistrationOption("Standard", "Free", available=True),),
        ),
        schedule=(
            ScheduleDay(
                "Meetup",
                "August 5",
                (
                    Session("18:30 - 19:00", "Arrival and Networking"),
                    Session("19:00 - 19:15", "Welcome and Introduction"),
                    Session("19:15 - 20:00", "Talk: Domain Modeling in Financial Services", "Alice Wagner"),
                    Session("20:00 - 20:15", "Break"),
                    Session("20:15 - 20:45", "Lightning Talk: Modeling Money Transfers", "Thomas Schmidt"),
                    Session("20:45 - 21:30", "Open Discussion and Networking"),
                ),
            ),
        ),
        past_events=(
            PastEvent("July 2025", "Berlin", 45, topic="Healthcare Domains"),
            PastEvent("June 2025", "Berlin", 50, topic="E-commerce Modeling"),
            PastEvent("May 2025", "Berlin", 40, topic="Event Sourcing"),
            PastEvent("April 2025", "Berlin", 48, topic="Bounded Contexts"),
        ),
    ),
)


# ---------------------------------------------------------------------------
# Frameworks
# ---------------------------------------------------------------------------

FRAMEWORKS: Tuple[Framework, ...] = (
    Framework(
        name="NetCorePal Cloud Framework",
        description=".NET based Clean DDD framework",
        language="dotnet",
        repo_url="https://github.com/netcorepal/netcorepal-cloud-framework",
        fallback_introduction=(
            "A cloud-native development framework based on .NET Core that supports Clean DDD principles."
        ),
    ),
    Framework(
        name="CAP4J",
        description="Java based Clean DDD framework",
        language="java",
        repo_url="https://github.com/netcorepal/cap4j",
        fallback_introduction=(
            "A Java implementation of the CAP protocol that supports Clean DDD principles and practices."
        ),
    ),
)
