from __future__ import annotations

from storefront.domain.entities.offering import Offering, Product, ServiceCategory

SERVICE_CATEGORIES: tuple[ServiceCategory, ...] = (
    ServiceCategory(
        id="wood",
        title="Wood Crafts",
        description="From delicate jewelry to custom furniture, we create unique wooden pieces with love and skill.",
        price="Starting at $39",
        offerings=(
            Offering(
                id="wood-art",
                title="Custom wood art and decor",
                description="Unique wooden art pieces and decorative items crafted to your specifications.",
                duration="2-4 weeks",
                price="Starting at $199",
            ),
            Offering(
                id="wood-jewelry",
                title="Handcrafted wood jewelry",
                description="Beautiful wooden jewelry pieces including necklaces, bracelets, and earrings.",
                duration="1-2 weeks",
                price="Starting at $39",
            ),
            Offering(
                id="wood-course",
                title="Weekend woodworking courses",
                description="Learn the basics of woodworking in our weekend courses.",
                duration="2 days",
                price="$299 per person",
            ),
        ),
    ),
    ServiceCategory(
        id="paper",
        title="Paper Crafts",
        description="Discover our handmade paper creations, perfect for special occasions or as unique gifts.",
        price="Starting at $12",
        offerings=(
            Offering(
                id="paper-cards",
                title="Handmade cards and invitations",
                description="Custom designed cards and invitations for weddings, birthdays, and special events.",
                duration="1-2 weeks",
                price="Starting at $12",
            ),
            Offering(
                id="paper-albums",
                title="Custom memory albums",
                description="Beautifully crafted photo albums and scrapbooks, personalized to your style.",
                duration="2-3 weeks",
                price="Starting at $89",
            ),
            Offering(
                id="paper-boxes",
                title="Decorative boxes and packaging",
                description="Unique gift boxes and packaging solutions for special occasions.",
                duration="1-2 weeks",
                price="Starting at $29",
            ),
            Offering(
                id="paper-bookmarks",
                title="Artisanal bookmarks",
                description="Hand-crafted bookmarks using various paper crafting techniques.",
                duration="3-5 days",
                price="Starting at $15",
            ),
        ),
    ),
    ServiceCategory(
        id="juggling",
        title="Juggling",
        description="Learn the art of juggling or book us for your next event.",
        price="Starting at $24",
        offerings=(
            Offering(
                id="juggling-sets",
                title="Beginner juggling sets",
                description="High-quality juggling equipment sets for beginners, including balls, clubs, and rings.",
                duration="Immediate",
                price="Starting at $24",
            ),
            Offering(
                id="juggling-lessons",
                title="Private and group lessons",
                description="Learn juggling from experienced performers. Available for all skill levels.",
                duration="1 hour",
                price="$49 per session",
            ),
            Offering(
                id="juggling-events",
                title="Event entertainment packages",
                description="Professional juggling performances for corporate events, parties, and festivals.",
                duration="1-2 hours",
                price="Starting at $299",
            ),
            Offering(
                id="juggling-parties",
                title="Children's party performances",
                description="Interactive juggling shows and workshops perfect for children's parties.",
                duration="45-60 minutes",
                price="$199 per party",
            ),
        ),
    ),
    ServiceCategory(
        id="art",
        title="Art & Painting",
        description="Express yourself through various art forms. We offer original paintings and workshops.",
        price="Starting at $89",
        offerings=(
            Offering(
                id="art-paintings",
                title="Original paintings",
                description="Commission unique paintings in various styles and mediums.",
                duration="2-4 weeks",
                price="Starting at $299",
            ),
            Offering(
                id="art-mixed",
                title="Mixed media artwork",
                description="Unique pieces combining different artistic mediums and techniques.",
                duration="3-5 weeks",
                price="Starting at $199",
            ),
            Offering(
                id="art-workshops",
                title="Art technique workshops",
                description="Learn various painting techniques in our hands-on workshops. All materials included.",
                duration="3 hours",
                price="$89 per session",
            ),
            Offering(
                id="art-commission",
                title="Custom commissions",
                description="Commission custom artwork tailored to your vision and space. Consultation included.",
                duration="3-6 weeks",
                price="Starting at $499",
            ),
        ),
    ),
    ServiceCategory(
        id="software",
        title="Software & Teaching",
        description="Get personalized guidance in software development or join our coding workshops.",
        price="Starting at $149",
        offerings=(
            Offering(
                id="software-basics",
                title="Programming basics courses",
                description="Introduction to programming fundamentals for beginners.",
                duration="6 weeks",
                price="$499 per course",
            ),
            Offering(
                id="software-web",
                title="Web development consulting",
                description="Expert consultation for your web development projects.",
                duration="Flexible",
                price="$149 per hour",
            ),
            Offering(
                id="software-custom",
                title="Custom software solutions",
                description="Tailored software development including planning, development, and deployment.",
                duration="Project-based",
                price="Starting at $999",
            ),
            Offering(
                id="software-mentoring",
                title="One-on-one mentoring",
                description="Personalized mentoring sessions to help you achieve your programming goals.",
                duration="1 hour",
                price="$99 per session",
            ),
        ),
    ),
)

PRODUCTS: tuple[Product, ...] = (
    Product(id="w1", name="Handcrafted Wooden Jewelry Box", price=89, category="Wood Art"),
    Product(id="w2", name="Wooden Pendant Necklace", price=39, category="Wood Jewelry"),
    Product(id="w3", name="Basic Woodworking Course", price=149, category="Courses"),
    Product(id="p1", name="Handmade Wedding Cards Set", price=29, category="Cards"),
    Product(id="p2", name="Vintage Style Bookmarks", price=12, category="Bookmarks"),
    Product(id="j1", name="Beginner Juggling Set", price=24, category="Sets"),
    Product(id="j2", name="Party Entertainment Package", price=199, category="Events"),
    Product(id="a1", name="Watercolor Landscape", price=299, category="Paintings"),
    Product(id="a2", name="Mixed Media Workshop", price=89, category="Lessons"),
    Product(id="s1", name="Web Development Consultation", price=149, category="Consulting"),
    Product(id="s2", name="Programming Basics Course", price=299, category="Courses"),
)
