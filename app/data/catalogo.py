"""Catálogo fijo de carreras, años de cursada y materias por carrera/año.

El orden de cada lista es el orden de inserción y, por lo tanto, el de los IDs
generados en una base recién creada.
"""

CARRERAS: list[tuple[str, str]] = [
    ("Producción de Multimedios", "Tecnicatura Superior en Producción de Multimedios"),
    ("Gestión de Energías Renovables", "Tecnicatura Superior en Gestión de Energías Renovables"),
    ("Petróleo y Gas", "Tecnicatura Superior en Petróleo y Gas"),
    ("Mantenimiento Industrial", "Tecnicatura Superior en Mantenimiento Industrial"),
    ("Logística", "Tecnicatura Superior en Logística"),
    ("Producción Industrial de Alimentos", "Tecnicatura Superior en Producción Industrial de Alimentos"),
    (
        "Confección de Indumentaria y Productos Textiles",
        "Tecnicatura Superior en Confección de Indumentaria y Productos Textiles",
    ),
    (
        "Gestión Administrativa orientada a la producción",
        "Tecnicatura Superior en Gestión Administrativa orientada a la producción",
    ),
]

ANIOS: list[tuple[str, int]] = [
    ("1er Año", 1),
    ("2do Año", 2),
    ("3er Año", 3),
]

# carrera -> año -> materias
MATERIAS: dict[str, dict[str, list[str]]] = {
    "Producción de Multimedios": {
        "1er Año": [
            "Política y Derecho a la Comunicación",
            "Psicología de la Comunicación",
            "Historia de los Medios y Sistemas de Comunicación",
            "Redacción y Lenguaje Digital",
            "Géneros Radiales y Televisivos",
            "Introducción a los Multimedios",
            "Realización Audiovisual",
        ],
        "2do Año": [
            "Inglés Técnico",
            "Técnicas de Investigación en la Producción de Multimedios",
            "Lenguaje Radiofónico",
            "Medios Interactivos",
            "Lenguaje, Edición y Montaje Audiovisual",
            "Fotografía e Imagen Digital",
            "Expresión Oral y Doblaje",
        ],
        "3er Año": [
            "Gestión y Estrategias Comunicacionales",
            "Periodismo Digital",
            "Diseño Gráfico",
            "Producciones Audiovisuales",
            "Marketing y Publicidad Digital",
            "Práctica Profesional Integral",
        ],
    },
    "Gestión de Energías Renovables": {
        "1er Año": [
            "Comunicación Oral y Escrita",
            "Problemáticas Socioculturales Contemporáneas",
            "Análisis Matemático",
            "Física",
            "Química",
            "Materiales y Procesos Productivos",
            "Electrotécnica",
            "Introducción a las Energías Renovables",
        ],
        "2do Año": [
            "Tecnologías de la Información y la Representación",
            "Probabilidad y Estadística",
            "Gestión Ambiental",
            "Instalaciones Eléctricas",
            "Instalaciones Térmicas y Fluidos",
            "Energía Hidráulica",
            "Energía Solar",
            "Práctica Profesionalizante I",
        ],
        "3er Año": [
            "Ética y Formación Profesional",
            "Seguridad Ocupacional",
            "Automatización",
            "Gestión de las Energías Renovables",
            "Instalaciones de Energías Renovables",
            "Energía Eólica",
            "Energía de la Biomasa",
            "Práctica Profesionalizante II",
        ],
    },
    "Petróleo y Gas": {
        "1er Año": [
            "Química",
            "Inglés Técnico",
            "Informática Aplicada",
            "Matemática",
            "Física General",
            "Introducción a la Industria de Hidrocarburos",
            "Geología y Reservorios",
            "Ambiente en Yacimientos",
        ],
        "2do Año": [
            "Estática y Resistencia de Materiales",
            "Mecánica de Fluidos",
            "Mediciones e Instalaciones Eléctricas",
            "Automatismos y Control",
            "Termodinámica y Máquinas Térmicas",
            "Perforación y Terminación de Pozos",
            "Sistemas Integrados de Gestión",
            "Instalaciones de Superficie de Producción",
        ],
        "3er Año": [
            "Evaluación de Proyectos",
            "Captación y Tratamiento de Gas",
            "Producción",
            "Recuperación Asistida",
            "Mantenimiento y Confiabilidad",
            "Seguridad en Yacimientos",
            "Formación y Desarrollo Profesional",
            "Práctica Profesional Integral",
        ],
    },
    "Mantenimiento Industrial": {
        "1er Año": [
            "Informática",
            "Inglés",
            "Matemática",
            "Física",
            "Química",
            "Mantenimiento Industrial",
        ],
        "2do Año": [
            "Sistemas de Representación Gráfica",
            "Probabilidad y Estadística",
            "Tecnología Mecánica y de los Materiales",
            "Metrología y Mediciones Eléctricas",
            "Tecnología del Frío y del Calor",
            "Electrotecnia",
            "Instalaciones, Máquinas y Equipos Industriales",
        ],
        "3er Año": [
            "Hidráulica y Neumática",
            "Logística",
            "Seguridad, Higiene y Protección Ambiental",
            "Motores de combustión",
            "Técnicas Modernas de Mantenimiento",
            "Electrónica, Automatismos y Control",
            "Instalaciones Eléctricas",
            "Electricidad",
            "Soldadura",
            "Máquinas - Herramientas",
            "Formación y Desarrollo Profesional",
            "Práctica Profesional Integral",
        ],
    },
    "Logística": {
        "1er Año": [
            "Problemáticas Socioculturales Contemporáneas",
            "Inglés",
            "Informática",
            "Análisis Matemático",
            "Economía",
            "Seguridad e Higiene",
            "Logística I",
            "Derecho del Transporte",
        ],
        "2do Año": [
            "Probabilidad y Estadística",
            "Inglés Técnico",
            "Logística II",
            "Proyección Presupuestaria y Costos",
            "Derecho en Logística y Normativa Aduanera",
            "Gestión de Compras y Contrataciones",
            "Gestión del Transporte",
            "Práctica Informática vinculada a la Logística",
        ],
        "3er Año": [
            "Ética y Formación Profesional",
            "Administración de Operaciones Logísticas",
            "Procesos Industriales Asociados",
            "Sistemas Integrados de Gestión",
            "Control Estadístico de Procesos",
            "Gestión de Almacenes",
            "Estrategia Logística",
            "Práctica Profesional Integral",
        ],
    },
    "Producción Industrial de Alimentos": {
        "1er Año": [
            "Informática",
            "Matemática",
            "Química General",
            "Física General",
            "Biología Celular",
            "Producción Alimentaria",
            "Tecnología de los Alimentos",
        ],
        "2do Año": [
            "Inglés",
            "Control de los Procesos y Automatismos",
            "Procesos Productivos",
            "Estadística",
            "Química de los Alimentos",
            "Microbiología de los Alimentos",
            "Tecnología de la Producción",
            "Laboratorio de Producción de Conservas",
            "Laboratorio de Producción de Confituras",
        ],
        "3er Año": [
            "Logística",
            "Gestión de la Calidad y la Inocuidad de los Alimentos",
            "Bromatología",
            "Proyecto Industrial",
            "Laboratorio de Producción Industrial",
            "Toxicología Alimentaria",
            "Formación y Desarrollo Profesional",
            "Práctica Profesional Integral",
        ],
    },
    "Confección de Indumentaria y Productos Textiles": {
        "1er Año": [
            "Matemática",
            "Inglés I",
            "Tecnologías de la Información y la Com.",
            "Química",
            "Gestión de las Organizaciones",
            "Economía de la Empresa",
            "Procesos Productivos",
            "Control de Calidad",
            "Dibujo Técnico",
            "Moldería I",
        ],
        "2do Año": [
            "Inglés II",
            "Gestión de Calidad, Seguridad y Ambiente",
            "Marco Jurídico Procesos Productivos",
            "Tec. de los Materiales y Proc. de Fab. Textil",
            "Proc. de Prod. y Conf. Textil Industrializada",
            "Moldería II",
            "Corte y Confección",
            "Diseño I",
        ],
        "3er Año": [
            "Informática Apl. a la Ind. de la Confección",
            "Fibras Textiles",
            "Corte Industrial",
            "Diseño II",
            "Proyecto Tecnológico Especifico",
            "Costura Industrial",
            "Geometrales",
            "Planif. y Control de la Producción Textil",
            "Práctica Profesional Integral",
        ],
    },
    "Gestión Administrativa orientada a la producción": {
        "1er Año": [
            "Matemática aplicada con orientación financiera",
            "Inglés Introductorio",
            "Gestión Comercial I",
            "Fundamentos de la Administración",
            "Contabilidad Básica",
            "Informática aplicada a la gestión administrativa",
        ],
        "2do Año": [
            "Economía Empresarial",
            "Estadística",
            "Inglés Técnico",
            "Derecho Laboral",
            "Administración de RRHH",
            "Creatividad e Innovación Empresarial",
            "Gestión Contable",
            "Procesos de la Producción Industrial",
        ],
        "3er Año": [
            "Sistemas de Gestión Integrada de la Calidad",
            "Costos para la toma de decisiones",
            "Derecho Empresarial",
            "Seminario de Negociación",
            "Gestión Comercial II",
            "Impuestos",
            "Proyectos de Inversión",
            "Práctica Profesional Integral",
        ],
    },
}
