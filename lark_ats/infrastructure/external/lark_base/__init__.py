"""
Integracion con Lark Base (Bitable) para la tabla de seguimiento de candidatos.

Contenido:
- Cliente HTTP minimo (requests) con token de tenant cacheado
- Declaracion estatica del esquema de la tabla ATS
- Operaciones CRUD sobre registros
- Provisioning de la tabla y sus campos
"""
