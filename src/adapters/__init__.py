"""
Couche adaptateurs (interfaces utilisateur).

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)

L'API HTTP vit dans src/web/. Chaque adaptateur depend de core/ et des
services, mais core/ ne depend jamais des adaptateurs.
"""
