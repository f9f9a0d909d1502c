"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur
et la taxonomie d'erreurs du domaine.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entites metier (User, Product, Order)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (identifiants types, pagination)
- errors : Erreurs du domaine et correspondance vers les statuts HTTP
"""
