"""TypeORM templates: services receive an injected entity repository."""

from nestgen.core.names import NameSet


def service(n: NameSet) -> str:
    return f"""
import {{ Injectable, NotFoundException }} from '@nestjs/common';
import {{ InjectRepository }} from '@nestjs/typeorm';
import {{ Repository }} from 'typeorm';
import {{ {n.pascal}Entity }} from './entities/{n.kebab}.entity';

@Injectable()
export class {n.pascal}Service {{
  constructor(
    @InjectRepository({n.pascal}Entity)
    private readonly repository: Repository<{n.pascal}Entity>,
  ) {{}}

  async findAll(): Promise<{n.pascal}Entity[]> {{
    return this.repository.find();
  }}

  async findOne(id: string): Promise<{n.pascal}Entity> {{
    const item = await this.repository.findOneBy({{ id }} as any);
    if (!item) throw new NotFoundException(`{n.pascal} ${{id}} not found`);
    return item;
  }}
}}
"""


def service_spec(n: NameSet) -> str:
    return f"""
import {{ Test, TestingModule }} from '@nestjs/testing';
import {{ getRepositoryToken }} from '@nestjs/typeorm';
import {{ {n.pascal}Service }} from './{n.kebab}.service';
import {{ {n.pascal}Entity }} from './entities/{n.kebab}.entity';

describe('{n.pascal}Service (TypeORM)', () => {{
  let service: {n.pascal}Service;

  beforeEach(async () => {{
    const module: TestingModule = await Test.createTestingModule({{
      providers: [
        {n.pascal}Service,
        {{ provide: getRepositoryToken({n.pascal}Entity), useValue: {{}} }},
      ],
    }}).compile();

    service = module.get<{n.pascal}Service>({n.pascal}Service);
  }});

  it('should be defined', () => {{
    expect(service).toBeDefined();
  }});
}});
"""


def controller(n: NameSet) -> str:
    return f"""
import {{ Controller, Get, Param }} from '@nestjs/common';
import {{ {n.pascal}Service }} from './{n.kebab}.service';

@Controller('{n.kebab}s')
export class {n.pascal}Controller {{
  constructor(private readonly service: {n.pascal}Service) {{}}

  @Get()
  findAll() {{
    return this.service.findAll();
  }}

  @Get(':id')
  findOne(@Param('id') id: string) {{
    return this.service.findOne(id);
  }}
}}
"""


def controller_spec(n: NameSet) -> str:
    return f"""
import {{ Test, TestingModule }} from '@nestjs/testing';
import {{ {n.pascal}Controller }} from './{n.kebab}.controller';
import {{ {n.pascal}Service }} from './{n.kebab}.service';

describe('{n.pascal}Controller (TypeORM)', () => {{
  let controller: {n.pascal}Controller;

  beforeEach(async () => {{
    const module: TestingModule = await Test.createTestingModule({{
      controllers: [{n.pascal}Controller],
      providers: [{{ provide: {n.pascal}Service, useValue: {{}} }}],
    }}).compile();

    controller = module.get<{n.pascal}Controller>({n.pascal}Controller);
  }});

  it('should be defined', () => {{
    expect(controller).toBeDefined();
  }});
}});
"""


def module(n: NameSet) -> str:
    return f"""
import {{ Module }} from '@nestjs/common';
import {{ TypeOrmModule }} from '@nestjs/typeorm';
import {{ {n.pascal}Entity }} from './entities/{n.kebab}.entity';
import {{ {n.pascal}Controller }} from './{n.kebab}.controller';
import {{ {n.pascal}Service }} from './{n.kebab}.service';

@Module({{
  imports: [TypeOrmModule.forFeature([{n.pascal}Entity])],
  controllers: [{n.pascal}Controller],
  providers: [{n.pascal}Service],
}})
export class {n.pascal}Module {{}}
"""
