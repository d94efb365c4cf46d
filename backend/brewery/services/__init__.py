# Services package init
"""
Brewery Backend — Services Layer
==================================

What:  Business logic layer sitting between routes (HTTP) and repositories (persistence).
How:   Services receive their repository and mapper through the constructor.
       `create_app()` builds one instance of each and stores it on `app.state`;
       routes reach them through the callables in `brewery.dependencies`.

Service Inventory:
    - BeerService:     list / get / create / replace / patch / delete beers
    - CustomerService: the same operations for customers
"""
